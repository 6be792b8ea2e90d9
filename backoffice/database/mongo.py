from motor.motor_asyncio import AsyncIOMotorClient
from motor.motor_asyncio import AsyncIOMotorDatabase
from motor.motor_asyncio import AsyncIOMotorCollection
from typing import Any, AsyncIterator, Dict, List, Optional
from bson import ObjectId
import logging

from backoffice.config import DEFAULT_DATABASE_NAME
from backoffice.core.exceptions import UnavailableError

logger = logging.getLogger(__name__)

# Chunk documents fetched per round trip while streaming a GridFS file
DOWNLOAD_BATCH_SIZE = 4


class MongoStore:
    """Read-only access to one MongoDB database and its GridFS bucket.

    A single instance is created per process, connected in the application
    lifespan and handed to request handlers through FastAPI dependencies.
    """

    def __init__(
        self,
        connection_string: str,
        database_name: str = "",
        bucket_name: str = "cvs",
        pool_options: Optional[Dict[str, Any]] = None,
    ):
        self.connection_string = connection_string
        self.database_name = database_name
        self.bucket_name = bucket_name
        self.pool_options = pool_options or {}
        self.client: Optional[AsyncIOMotorClient] = None
        self.database: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> AsyncIOMotorDatabase:
        """Connect to MongoDB and return the database instance."""
        if not self.connection_string:
            logger.critical("MONGODB_URI is not configured")
            raise RuntimeError("MONGODB_URI is not configured")

        try:
            self.client = AsyncIOMotorClient(
                self.connection_string, **self.pool_options
            )
            # Test the connection
            await self.client.admin.command("ping")

            if self.database_name:
                self.database = self.client[self.database_name]
            else:
                self.database = self.client.get_default_database(DEFAULT_DATABASE_NAME)
            logger.info(f"MongoDB connected to database '{self.database.name}'")
            return self.database

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            if self.client is not None:
                self.client.close()
            self.client = None
            self.database = None
            raise

    @property
    def is_connected(self) -> bool:
        return self.database is not None

    @property
    def name(self) -> str:
        return self._get_database().name

    def _get_database(self) -> AsyncIOMotorDatabase:
        if self.database is None:
            raise UnavailableError("Database connection is not available")
        return self.database

    def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        """Get a collection from the database."""
        return self._get_database()[collection_name]

    async def close(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.client = None
        self.database = None

    async def ping(self) -> bool:
        await self._get_database().command("ping")
        return True

    # Collections

    async def list_collection_names(self) -> List[str]:
        return await self._get_database().list_collection_names()

    async def collection_stats(self, collection_name: str) -> Dict[str, Any]:
        return await self._get_database().command("collStats", collection_name)

    async def database_stats(self) -> Dict[str, Any]:
        return await self._get_database().command("dbStats")

    async def count_documents(
        self, collection_name: str, filter_dict: Optional[Dict[str, Any]] = None
    ) -> int:
        return await self.get_collection(collection_name).count_documents(
            filter_dict or {}
        )

    async def find_one(
        self, collection_name: str, filter_dict: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        return await self.get_collection(collection_name).find_one(filter_dict or {})

    async def find(
        self,
        collection_name: str,
        filter_dict: Optional[Dict[str, Any]] = None,
        sort: Optional[List[tuple]] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(filter_dict or {})

        if sort:
            cursor = cursor.sort(sort)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)

        return await cursor.to_list(length=limit or None)

    # GridFS

    @property
    def files_collection(self) -> str:
        return f"{self.bucket_name}.files"

    @property
    def chunks_collection(self) -> str:
        return f"{self.bucket_name}.chunks"

    async def list_files(self) -> List[Dict[str, Any]]:
        cursor = self.get_collection(self.files_collection).find({})
        return await cursor.to_list(length=None)

    async def find_file(self, file_id: ObjectId) -> Optional[Dict[str, Any]]:
        return await self.get_collection(self.files_collection).find_one(
            {"_id": file_id}
        )

    async def iter_file_chunks(self, file_id: ObjectId) -> AsyncIterator[bytes]:
        """Yield the stored bytes of a GridFS file in chunk order.

        Chunks are pulled from the server only as the consumer asks for them,
        and the cursor is closed however the iteration ends.
        """
        cursor = (
            self.get_collection(self.chunks_collection)
            .find({"files_id": file_id}, projection={"data": 1, "n": 1})
            .sort("n", 1)
            .batch_size(DOWNLOAD_BATCH_SIZE)
        )
        try:
            async for chunk in cursor:
                yield bytes(chunk["data"])
        finally:
            await cursor.close()
            logger.debug(f"Closed chunk cursor for file {file_id}")
