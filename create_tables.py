# create_tables.py
# 本地开发用：不走 Alembic，直接按模型建表（目标库取 WMS_DATABASE_URL）
import asyncio

from app.db.base import Base, init_models
from app.db.session import async_engine


async def main() -> None:
    init_models()
    print("正在创建所有数据库表...")
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await async_engine.dispose()
    print("所有数据库表创建完成！")


if __name__ == "__main__":
    asyncio.run(main())
