"""
Collection Service for introspecting and browsing MongoDB collections.

Every method is a read: collection enumeration with size metrics, paginated
browsing with optional free-text search, and single-document lookup.
"""

import asyncio
import logging
from typing import Any, Dict

from backoffice.core.exceptions import NotFoundError
from backoffice.database.mongo import MongoStore
from backoffice.schemas.collections import (
    CollectionDescriptor,
    DatabaseStats,
    DatabaseSummary,
)
from backoffice.schemas.common import PageRequest, PageResult, get_pagination_metadata
from backoffice.services.search import SampleFieldSearch
from backoffice.utils.helpers import parse_object_id, to_jsonable

logger = logging.getLogger(__name__)


class CollectionService:
    """
    Service for reading collections of the administered database.

    This class provides the operations behind the ``/api/collections`` and
    ``/api/stats`` endpoints using an injected ``MongoStore``.
    """

    def __init__(self, store: MongoStore):
        self.store = store
        self.search_strategy = SampleFieldSearch(store)

    async def describe_collection(self, collection_name: str) -> CollectionDescriptor:
        """
        Stats and document count of one collection.

        Failures are folded into the descriptor so that one broken
        collection does not fail a whole listing.
        """
        try:
            stats, count = await asyncio.gather(
                self.store.collection_stats(collection_name),
                self.store.count_documents(collection_name),
            )
        except Exception as e:
            logger.warning(f"Failed to get stats for collection {collection_name}: {e}")
            return CollectionDescriptor(name=collection_name, error=str(e))

        return CollectionDescriptor(
            name=collection_name,
            count=count,
            size=stats.get("size", 0),
            avgObjSize=stats.get("avgObjSize", 0),
            storageSize=stats.get("storageSize", 0),
            indexes=stats.get("nindexes", 0),
            totalIndexSize=stats.get("totalIndexSize", 0),
        )

    async def list_collections(self) -> list[CollectionDescriptor]:
        collection_names = await self.store.list_collection_names()
        return list(
            await asyncio.gather(
                *(self.describe_collection(name) for name in collection_names)
            )
        )

    async def database_stats(self) -> DatabaseStats:
        collections, db_stats = await asyncio.gather(
            self.list_collections(), self.store.database_stats()
        )
        return DatabaseStats(
            database=DatabaseSummary(
                name=self.store.name,
                collections=len(collections),
                dataSize=db_stats.get("dataSize", 0),
                storageSize=db_stats.get("storageSize", 0),
                indexSize=db_stats.get("indexSize", 0),
            ),
            collections=collections,
        )

    async def browse(self, collection_name: str, request: PageRequest) -> PageResult:
        """
        One page of a collection, filtered by ``request.search`` when given.

        Returns:
            PageResult: the documents of the page and the pagination totals.
        """
        filter_dict: Dict[str, Any] = {}
        if request.search:
            filter_dict = await self.search_strategy.build_filter(
                collection_name, request.search
            )
            if filter_dict is None:
                return PageResult(
                    data=[],
                    pagination=get_pagination_metadata(0, request.page, request.limit),
                )

        documents, total = await asyncio.gather(
            self.store.find(
                collection_name,
                filter_dict,
                sort=request.sort,
                skip=request.skip,
                limit=request.limit,
            ),
            self.store.count_documents(collection_name, filter_dict),
        )

        return PageResult(
            data=[to_jsonable(doc) for doc in documents],
            pagination=get_pagination_metadata(total, request.page, request.limit),
        )

    async def get_document(self, collection_name: str, document_id: str) -> Dict[str, Any]:
        object_id = parse_object_id(document_id)
        document = await self.store.find_one(collection_name, {"_id": object_id})
        if not document:
            raise NotFoundError("Document not found")
        return to_jsonable(document)
