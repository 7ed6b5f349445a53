import logging


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach a single stderr handler to the root logger.

    Safe to call on every cold start; an already configured root logger
    only has its level updated.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    root.setLevel(level.upper() if isinstance(level, str) else level)

    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
