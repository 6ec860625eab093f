"""Start the song catalog API under uvicorn.

Host, port and reload default to the values in Settings (PORT, HOST, DEBUG
env vars), so a bare ``python run_api.py`` serves on port 3001.
"""
import uvicorn
import argparse
import logging
from pathlib import Path
from song_catalog.core.config import Settings, get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"Run {settings.app_name}")
    parser.add_argument('--host', default=settings.host)
    parser.add_argument('--port', type=int, default=settings.port)
    reload_group = parser.add_mutually_exclusive_group()
    reload_group.add_argument('--reload', dest='reload', action='store_true')
    reload_group.add_argument('--no-reload', dest='reload', action='store_false')
    parser.set_defaults(reload=settings.debug)
    return parser


def main(argv=None):
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)

    # only the package is watched, not data/ which an outside process rewrites
    watch = [str(Path(__file__).parent / 'song_catalog')] if args.reload else None
    uvicorn.run(
        "song_catalog.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        reload_dirs=watch,
        log_level=settings.log_level,
    )


if __name__ == '__main__':
    main()
