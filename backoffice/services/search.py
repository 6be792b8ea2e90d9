"""
Free-text search over schemaless collections.

Collections carry no declared schema, so the searchable fields are discovered
by sampling: one arbitrary document is read and its top-level string-valued
fields become the fields a search term is matched against. Fields that the
sampled document lacks are not searched.
"""

import asyncio
import logging
import re
from typing import Any, Dict, List, Optional

from backoffice.constants import SEARCH_MATCH_LIMIT
from backoffice.core.exceptions import BadRequestError
from backoffice.database.mongo import MongoStore
from backoffice.schemas.search import CollectionSearchResult, SearchResult
from backoffice.utils.helpers import to_jsonable

logger = logging.getLogger(__name__)


class SampleFieldSearch:
    """Build a case-insensitive substring filter from one sampled document."""

    def __init__(self, store: MongoStore):
        self.store = store

    @staticmethod
    def text_fields(sample: Optional[Dict[str, Any]]) -> List[str]:
        if not sample:
            return []
        return [key for key, value in sample.items() if isinstance(value, str)]

    @staticmethod
    def filter_for_fields(fields: List[str], term: str) -> Optional[Dict[str, Any]]:
        """OR of one regex clause per field, or ``None`` when there is nothing to match."""
        if not fields:
            return None
        pattern = re.escape(term)
        return {
            "$or": [{field: {"$regex": pattern, "$options": "i"}} for field in fields]
        }

    async def build_filter(
        self, collection_name: str, term: str
    ) -> Optional[Dict[str, Any]]:
        """Filter for ``term`` in ``collection_name``.

        ``None`` means no document can match: the collection is empty or its
        sampled document has no string field.
        """
        sample = await self.store.find_one(collection_name, {})
        fields = self.text_fields(sample)
        if not fields:
            logger.debug(
                f"No searchable string fields sampled in collection {collection_name}"
            )
        return self.filter_for_fields(fields, term)


class SearchService:
    """Search one or every collection, each independently of the others."""

    def __init__(self, store: MongoStore):
        self.store = store
        self.strategy = SampleFieldSearch(store)

    async def _search_collection(
        self, collection_name: str, term: str
    ) -> CollectionSearchResult:
        try:
            filter_dict = await self.strategy.build_filter(collection_name, term)
            if filter_dict is None:
                return CollectionSearchResult(collection=collection_name)

            matches = await self.store.find(
                collection_name, filter_dict, limit=SEARCH_MATCH_LIMIT
            )
            return CollectionSearchResult(
                collection=collection_name,
                count=len(matches),
                results=[to_jsonable(doc) for doc in matches],
            )
        except Exception as e:
            logger.warning(f"Search failed in collection {collection_name}: {e}")
            return CollectionSearchResult(collection=collection_name, error=str(e))

    async def search(
        self, query: Optional[str], collection_name: Optional[str] = None
    ) -> SearchResult:
        if not query or not query.strip():
            raise BadRequestError('Query parameter "q" is required')

        if collection_name:
            collection_names = [collection_name]
        else:
            collection_names = await self.store.list_collection_names()

        results = await asyncio.gather(
            *(self._search_collection(name, query) for name in collection_names)
        )
        return SearchResult(query=query, results=list(results))
