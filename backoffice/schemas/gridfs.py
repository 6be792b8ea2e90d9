from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FileDescriptor(BaseModel):
    """Metadata of one GridFS file as stored in ``<bucket>.files``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    filename: Optional[str] = None
    length: int = 0
    chunkSize: Optional[int] = None
    uploadDate: Optional[str] = None
    contentType: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class FileList(BaseModel):
    files: List[FileDescriptor]
    count: int
