"""Service entry point: bind the first free port from the preferred one and serve."""

import errno
import socket
import sys

import uvicorn

from content_analyzer.config import settings
from content_analyzer.core.exceptions import NoFreePortError
from content_analyzer.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _bind(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(2048)
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def bind_socket(host: str, start_port: int, attempts: int = 10) -> socket.socket:
    """Return a listening socket on the first free port in ``start_port .. start_port+attempts-1``.

    Only "address in use" moves on to the next port; any other bind error
    propagates immediately.
    """
    for attempt in range(attempts):
        port = start_port + attempt
        try:
            return _bind(host, port)
        except OSError as e:
            if e.errno != errno.EADDRINUSE:
                raise
            logger.warning(f"Port {port} in use, trying {port + 1}...")

    raise NoFreePortError(start_port, attempts)


def serve(host: str | None = None, port: int | None = None, attempts: int | None = None) -> None:
    host = host or settings.host
    port = port or settings.port
    attempts = attempts or settings.port_attempts

    sock = bind_socket(host, port, attempts)
    bound_port = sock.getsockname()[1]
    logger.info(f"Server running on http://{host}:{bound_port}")

    from content_analyzer.main import app

    config = uvicorn.Config(app, host=host, port=bound_port, log_config=None)
    uvicorn.Server(config).run(sockets=[sock])


def main() -> None:
    setup_logging(settings.log_level)
    try:
        serve()
    except NoFreePortError as e:
        logger.error(f"Failed to start server: {e.message}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
