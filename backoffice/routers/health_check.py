from fastapi import APIRouter, Depends

from backoffice.core.deps import get_store
from backoffice.core.exceptions import UnavailableError
from backoffice.database.mongo import MongoStore

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness probe endpoint.

    Returns:
        dict: Static status payload indicating service health.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(store: MongoStore = Depends(get_store)):
    """Readiness probe: the database must answer a ping."""
    try:
        await store.ping()
    except Exception as e:
        raise UnavailableError(f"Database ping failed: {e}") from e
    return {"status": "ready"}
