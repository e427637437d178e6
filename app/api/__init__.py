# app/api/__init__.py
"""
API package：路由聚合见 app/api/router.py，异常翻译见 app/api/errors.py。
"""

__all__ = []
