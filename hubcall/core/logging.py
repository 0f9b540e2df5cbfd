import logging


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger format for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
