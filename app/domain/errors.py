# app/domain/errors.py
from __future__ import annotations


class BizError(Exception):
    """业务异常基类：code / status 由 API 层翻译为 Problem 响应。"""

    code = "BIZ_ERROR"
    status = 400

    def __init__(self, message: str, code: str | None = None, status: int | None = None):
        super().__init__(message)
        if code:
            self.code = code
        if status:
            self.status = status
        self.message = message


class NotFoundError(BizError):
    code = "NOT_FOUND"
    status = 404


class InvalidStateArgumentError(BizError, ValueError):
    """目标状态为空或无法识别"""

    code = "INVALID_ARGUMENT"
    status = 422


class IllegalTransitionError(BizError):
    """状态回退 / 创建后未先初始化"""

    code = "ILLEGAL_TRANSITION"
    status = 409


class InsufficientValueError(IllegalTransitionError):
    """离开 CREATED 时缺少托盘或目标"""

    code = "MISSING_PRECONDITION"
    status = 409
