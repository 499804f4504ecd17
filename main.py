import logging
import os

import uvicorn

from gamedeals.core.config import settings

logger = logging.getLogger(__name__)


def ssl_options() -> dict:
    """TLS key/certificate for uvicorn when both files exist, else plain HTTP."""
    if os.path.exists(settings.SSL_KEY_PATH) and os.path.exists(settings.SSL_CERT_PATH):
        return {"ssl_keyfile": settings.SSL_KEY_PATH, "ssl_certfile": settings.SSL_CERT_PATH}
    logger.warning("SSL certificates not found! Running server on HTTP.")
    return {}


def main():
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    options = ssl_options()
    scheme = "https" if options else "http"
    logger.info(f"Server running on {scheme}://{settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "gamedeals.server:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        **options,
    )


if __name__ == '__main__':
    main()
