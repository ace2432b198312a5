import logging
from config.setting import settings


def setup_logging() -> None:
    """Configure the root logger

        Installs a console handler using the level and
        format from settings. Safe to call more than once.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL.upper())

    if not any(getattr(h, "_studyplan", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        console_handler._studyplan = True
        root_logger.addHandler(console_handler)

    if not settings.TESTING:
        # Third-party libraries are noisy at INFO
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("alembic").setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging configured")
