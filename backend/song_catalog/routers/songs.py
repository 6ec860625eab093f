from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging
from ..core.deps import get_song_store
from ..schemas.music import SongsOut, ErrorOut
from ..services.song_store import SongStore

router = APIRouter(prefix="/api/songs", tags=["Songs"])

logger = logging.getLogger(__name__)


@router.get(
    "",
    summary="List all songs",
    responses={
        200: {"model": SongsOut, "description": "Every song in the catalog"},
        500: {"model": ErrorOut, "description": "Songs could not be returned"},
    },
)
def list_songs(store: SongStore = Depends(get_song_store)):
    """Return every song with its metadata, in file order.

    A missing or corrupt songs file is reported as an empty catalog here;
    use /api/health to tell the two apart.
    """
    try:
        songs = store.list_songs()
        if songs is None:
            raise TypeError("songs document is null")
        body = {"success": True}
        # count only exists for documents with a length: arrays and strings
        if isinstance(songs, (list, str)):
            body["count"] = len(songs)
        body["songs"] = songs
        # rendering here keeps serialization errors inside the try
        return JSONResponse(content=body)
    except Exception as e:
        logger.exception('list_songs failed: path=%s', store.path)
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": f"Error reading songs: {e}"},
        )
