from fastapi import Request
from ..services.song_store import SongStore


def get_song_store(request: Request) -> SongStore:
    # settings live on the app built by create_app, so each app reads its own file
    return SongStore(request.app.state.settings.songs_file)
