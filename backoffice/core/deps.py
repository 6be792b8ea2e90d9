"""FastAPI dependencies shared by the routers."""

from fastapi import Depends, Request

from backoffice.core.exceptions import UnavailableError
from backoffice.database.mongo import MongoStore
from backoffice.services.collection import CollectionService
from backoffice.services.gridfs import FileService
from backoffice.services.search import SearchService


def get_store(request: Request) -> MongoStore:
    """The store attached to the app at start-up, if it is connected."""
    store = getattr(request.app.state, "store", None)
    if store is None or not store.is_connected:
        raise UnavailableError("Database connection is not available")
    return store


def get_collection_service(store: MongoStore = Depends(get_store)) -> CollectionService:
    return CollectionService(store)


def get_search_service(store: MongoStore = Depends(get_store)) -> SearchService:
    return SearchService(store)


def get_file_service(store: MongoStore = Depends(get_store)) -> FileService:
    return FileService(store)
