from typing import List, Optional

from pydantic import BaseModel, Field


class CollectionDescriptor(BaseModel):
    """Size metrics for one collection, taken at request time."""

    name: str
    count: int = Field(default=0, ge=0)
    size: int = 0
    avgObjSize: float = 0
    storageSize: int = 0
    indexes: int = 0
    totalIndexSize: int = 0
    error: Optional[str] = None


class DatabaseSummary(BaseModel):
    name: str
    collections: int
    dataSize: float = 0
    storageSize: float = 0
    indexSize: float = 0


class DatabaseStats(BaseModel):
    database: DatabaseSummary
    collections: List[CollectionDescriptor]
