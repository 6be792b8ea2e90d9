import logging
import sys
import asyncio
import random
from datetime import datetime, timedelta, timezone

from motor.motor_asyncio import AsyncIOMotorGridFSBucket

from backoffice.config import MONGODB_URI, MONGODB_DATABASE, GRIDFS_BUCKET, configure_logging
from backoffice.database.mongo import MongoStore

configure_logging()
logger = logging.getLogger(__name__)

FIRST_NAMES = ["Maria", "José", "Lucía", "Carlos", "Ana", "Pedro", "Elena", "Mario"]
LAST_NAMES = ["García", "Martínez", "López", "Sánchez", "Pérez", "Gómez"]
SKILLS = ["python", "mongodb", "react", "sql", "docker", "excel"]


def build_candidates(count: int):
    now = datetime.now(timezone.utc)
    candidates = []
    for index in range(count):
        first_name = random.choice(FIRST_NAMES)
        last_name = random.choice(LAST_NAMES)
        candidates.append(
            {
                "name": f"{first_name} {last_name}",
                "email": f"{first_name.lower()}.{index}@example.com",
                "active": index % 3 != 0,
                "skills": random.sample(SKILLS, k=2),
                "address": {"city": "Madrid", "country": "ES"},
                "createdAt": now - timedelta(days=index),
            }
        )
    return candidates


async def seed(count: int = 120) -> None:
    store = MongoStore(MONGODB_URI, database_name=MONGODB_DATABASE, bucket_name=GRIDFS_BUCKET)
    database = await store.connect()
    try:
        existing = await store.count_documents("candidates")
        if existing:
            logger.info(f"Collection 'candidates' already has {existing} documents, skipping")
        else:
            result = await database["candidates"].insert_many(build_candidates(count))
            logger.info(f"Inserted {len(result.inserted_ids)} candidates")

        bucket = AsyncIOMotorGridFSBucket(database, bucket_name=GRIDFS_BUCKET)
        file_id = await bucket.upload_from_stream(
            "example-cv.txt",
            b"Curriculum vitae\nMaria Garcia\nPython developer\n",
            metadata={"candidateId": "demo", "contentType": "text/plain"},
        )
        await database[store.files_collection].update_one(
            {"_id": file_id}, {"$set": {"contentType": "text/plain"}}
        )
        logger.info(f"Uploaded example file {file_id} to bucket '{GRIDFS_BUCKET}'")
    finally:
        await store.close()


if __name__ == "__main__":
    if not MONGODB_URI:
        logger.error(
            "MONGODB_URI is not configured. Set it in the environment or in a .env file."
        )
        sys.exit(1)

    count = int(sys.argv[1]) if len(sys.argv) > 1 else 120
    asyncio.run(seed(count))
