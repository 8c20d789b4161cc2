import logging

import uvicorn

from tasklist.config import get_settings

logger = logging.getLogger("tasklist")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Servidor ejecutándose en http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "tasklist.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
