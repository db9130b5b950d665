import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached by configure_logging at the application entry
    point; library use without it stays silent.
    """
    return logging.getLogger(f"btex.{name}")
