from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from ..core.deps import get_song_store
from ..schemas.music import HealthOut
from ..services.song_store import SongStore

router = APIRouter(prefix="/api/health", tags=["Health"])


def _timestamp() -> str:
    # millisecond precision with a Z suffix, e.g. 2024-05-01T12:00:00.000Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "",
    summary="Service and data file health",
    responses={
        200: {"model": HealthOut, "description": "songs file present and valid"},
        503: {"model": HealthOut, "description": "songs file missing or unreadable"},
    },
)
def health(store: SongStore = Depends(get_song_store)):
    """Report whether the songs file exists and parses as JSON.

    database is "connected" (200), "disconnected" when the file is missing
    (503) or "error" when it cannot be read or parsed (503).
    """
    report = store.check_health()
    return JSONResponse(
        status_code=200 if report.ok else 503,
        content={
            "status": "OK" if report.ok else "ERROR",
            "message": report.message,
            "timestamp": _timestamp(),
            "database": report.database.value,
        },
    )
