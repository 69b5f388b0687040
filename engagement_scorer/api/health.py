import time
from datetime import datetime, timezone

from fastapi import APIRouter

from ..platform.brand import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["Health"])

_STARTED_AT = time.monotonic()


@router.get("/health")
def health_check():
    return {
        "status": "OK",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
    }
