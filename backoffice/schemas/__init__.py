from .auth import LoginRequest, LoginResponse, VerifyResponse
from .common import PageRequest, PageResult, PaginationMetadata
from .collections import CollectionDescriptor, DatabaseStats
from .gridfs import FileDescriptor, FileList
from .search import CollectionSearchResult, SearchResult

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "VerifyResponse",
    "PageRequest",
    "PageResult",
    "PaginationMetadata",
    "CollectionDescriptor",
    "DatabaseStats",
    "FileDescriptor",
    "FileList",
    "CollectionSearchResult",
    "SearchResult",
]
