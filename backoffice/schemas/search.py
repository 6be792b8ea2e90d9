from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class CollectionSearchResult(BaseModel):
    collection: str
    count: int = 0
    results: List[Dict[str, Any]] = []
    error: Optional[str] = None


class SearchResult(BaseModel):
    query: str
    results: List[CollectionSearchResult]
