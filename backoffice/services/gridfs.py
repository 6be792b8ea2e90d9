"""
File Service for the GridFS bucket exposed by the backoffice.
"""

import logging
from dataclasses import dataclass
from typing import AsyncIterator, List

from backoffice.core.exceptions import NotFoundError
from backoffice.database.mongo import MongoStore
from backoffice.schemas.gridfs import FileDescriptor
from backoffice.utils.helpers import parse_object_id, to_jsonable

logger = logging.getLogger(__name__)


@dataclass
class FileDownload:
    """A resolved file and the lazy stream of its bytes."""

    descriptor: FileDescriptor
    chunks: AsyncIterator[bytes]


class FileService:
    def __init__(self, store: MongoStore):
        self.store = store

    @staticmethod
    def _descriptor(file_doc: dict) -> FileDescriptor:
        return FileDescriptor(**to_jsonable(file_doc))

    async def list_files(self) -> List[FileDescriptor]:
        return [self._descriptor(doc) for doc in await self.store.list_files()]

    async def open_download(self, file_id: str) -> FileDownload:
        """Resolve ``file_id`` and prepare its byte stream without reading it yet."""
        object_id = parse_object_id(file_id)
        file_doc = await self.store.find_file(object_id)
        if not file_doc:
            raise NotFoundError("File not found")

        logger.info(
            f"Streaming GridFS file {file_id} ({file_doc.get('length', 0)} bytes)"
        )
        return FileDownload(
            descriptor=self._descriptor(file_doc),
            chunks=self.store.iter_file_chunks(object_id),
        )
