"""
Web launcher for TuneFlow.

Configures logging and runs the FastAPI backend under uvicorn.
"""

import socket
import sys
from pathlib import Path

from loguru import logger

from .core.config import load_config
from .core.output import setup_from_config

# Project root detection (where pyproject.toml and web/ live)
PROJECT_ROOT = Path(__file__).parent.parent.parent


def is_port_available(host: str, port: int) -> bool:
    """
    Check if a port is available for binding.

    Args:
        host: Interface to bind
        port: Port number to check

    Returns:
        True if port is available, False if already in use
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.settimeout(1.0)
            s.bind((host, port))
            return True
        except OSError:
            return False


def main() -> int:
    import uvicorn

    config = load_config()
    log_file = setup_from_config(config.logging)

    if not is_port_available(config.web.host, config.web.port):
        logger.error(f"Port {config.web.port} already in use")
        print(f"Port {config.web.port} already in use", file=sys.stderr)
        return 1

    if not config.youtube.api_key:
        logger.warning("No YouTube API key configured; search returns demo results")

    logger.info(f"Starting TuneFlow on {config.web.host}:{config.web.port} (log: {log_file})")
    uvicorn.run(
        "web.backend.main:app",
        host=config.web.host,
        port=config.web.port,
        app_dir=str(PROJECT_ROOT),
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
