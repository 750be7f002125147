"""Process entry point.

Starts uvicorn on the configured port, moving once to the fallback
port when the configured one is already taken.
"""

import socket

import structlog
import uvicorn

from catalog_api.infrastructure.config import settings

logger = structlog.get_logger()


def port_available(host: str, port: int) -> bool:
    """Check whether a TCP port can be bound on the host."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind((host, port))
        except OSError:
            return False
    return True


def select_port(host: str, port: int, fallback_port: int) -> int:
    """Pick the configured port, or the fallback if it is busy.

    The fallback is not probed; if it is busy too, uvicorn reports it.
    """
    if port_available(host, port):
        return port
    logger.warning("Port is busy, trying fallback", port=port, fallback_port=fallback_port)
    return fallback_port


def run() -> None:
    """Run the catalog API."""
    port = select_port(settings.host, settings.port, settings.fallback_port)
    logger.info(
        "Catalog API starting",
        url=f"http://localhost:{port}",
        featured=[
            "GET /products",
            "GET /products/category/Electronics",
            "GET /products/by-color/Blue",
            "POST /products",
            "POST /products/:id/variants",
        ],
    )
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
