# app/db/uow.py
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger

log = get_logger("db.uow")


class UnitOfWork:
    """
    轻量事务边界：
    - 读写：无异常 commit，有异常 rollback 后原样抛出
    - 只读（read_only=True）：结束时总是 rollback，不落任何写入
    - 进入时 session 已在外部事务中：不提交也不回滚，事务归外部调用方；
      读写只 flush，把改动交给外部事务
    Handler / Service 内部不得自行控事务。
    """

    def __init__(self, session: AsyncSession, *, read_only: bool = False) -> None:
        self.session = session
        self.read_only = read_only
        self._own = False

    async def __aenter__(self) -> "UnitOfWork":
        self._own = not self.session.in_transaction()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self._own:
            if exc_type is None and not self.read_only:
                await self.session.flush()
            return
        if exc_type is not None:
            log.debug("rollback on %s: %s", exc_type.__name__, exc)
            await self.session.rollback()
            return
        if self.read_only:
            # 先解除托管再回滚，已加载的对象保持可读
            self.session.expunge_all()
            await self.session.rollback()
        else:
            await self.session.commit()
