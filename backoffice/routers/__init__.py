# backoffice/routers/__init__.py
from .auth import router as auth_router
from .collections import router as collections_router
from .gridfs import router as gridfs_router
from .health_check import router as health_check_router
from .search import router as search_router
from .ui import router as ui_router, shell_router as ui_shell_router

__all__ = [
    "auth_router",
    "collections_router",
    "gridfs_router",
    "health_check_router",
    "search_router",
    "ui_router",
    "ui_shell_router",
]
