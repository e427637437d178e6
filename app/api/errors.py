# app/api/errors.py
from __future__ import annotations

import uuid
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from app.api.problem import make_problem
from app.core.logging import get_logger
from app.domain.errors import BizError

logger = get_logger("api")


def _new_trace_id() -> str:
    return f"t_{uuid.uuid4().hex[:12]}"


def _ctx(req: Request) -> Dict[str, Any]:
    return {"path": getattr(req.url, "path", ""), "method": req.method}


def register_exception_handlers(app: FastAPI) -> None:
    """统一把各类异常翻译为 Problem 形状：{error_code, message, http_status, context, ...}"""

    @app.exception_handler(BizError)
    async def _biz_exc(req: Request, exc: BizError):
        content = make_problem(
            status_code=exc.status,
            error_code=exc.code,
            message=exc.message,
            context=_ctx(req),
            details=[{"type": "state", "reason": exc.message}],
        )
        return JSONResponse(status_code=exc.status, content=content)

    @app.exception_handler(StaleDataError)
    async def _stale_exc(req: Request, exc: StaleDataError):
        logger.warning("optimistic lock conflict: %s", exc)
        content = make_problem(
            status_code=409,
            error_code="OPTIMISTIC_LOCK_CONFLICT",
            message="数据已被并发修改，请刷新后重试",
            context=_ctx(req),
        )
        return JSONResponse(status_code=409, content=content)

    @app.exception_handler(IntegrityError)
    async def _integrity_exc(req: Request, exc: IntegrityError):
        logger.warning("integrity error: %s", exc.orig)
        content = make_problem(
            status_code=409,
            error_code="CONSTRAINT_VIOLATION",
            message="违反数据约束",
            context=_ctx(req),
        )
        return JSONResponse(status_code=409, content=content)

    @app.exception_handler(RequestValidationError)
    async def _validation_exc(req: Request, exc: RequestValidationError):
        details: List[Dict[str, Any]] = []
        for i, e in enumerate(exc.errors()):
            if not isinstance(e, dict):
                continue
            loc = ".".join(str(p) for p in e.get("loc", ()))
            details.append(
                {
                    "type": "validation",
                    "path": loc or f"validation[{i}]",
                    "reason": str(e.get("msg") or e.get("type") or "invalid"),
                }
            )
        content = make_problem(
            status_code=422,
            error_code="request_validation_error",
            message="请求参数不合法",
            context=_ctx(req),
            details=details,
        )
        return JSONResponse(status_code=422, content=content)

    @app.exception_handler(HTTPException)
    async def _http_exc(req: Request, exc: HTTPException):
        msg = str(exc.detail) if exc.detail is not None else "请求被拒绝"
        content = make_problem(
            status_code=exc.status_code,
            error_code="http_error",
            message=msg,
            context=_ctx(req),
        )
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def _unhandled_exc(req: Request, exc: Exception):
        trace_id = _new_trace_id()
        logger.exception("UNHANDLED_EXC[%s]: %s", trace_id, exc)
        content = make_problem(
            status_code=500,
            error_code="internal_error",
            message="系统异常，请稍后重试",
            context=_ctx(req),
            trace_id=trace_id,
        )
        return JSONResponse(status_code=500, content=content)
