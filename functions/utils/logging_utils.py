import logging


def get_logger(name):
    """
    Creates and returns a logger with the specified name.

    This utility function provides a standardized way to create loggers
    across the callables, so every handler logs with the same format.

    Args:
        name: The name for the logger, typically __name__ from the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Handlers are attached once per logger name
    if not logger.handlers:
        logger.setLevel(logging.INFO)

        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)

    return logger
