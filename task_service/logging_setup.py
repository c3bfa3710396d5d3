import logging
import sys
from typing import Union

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Union[str, int] = "INFO") -> None:
    """Configure the task_service logger hierarchy.

    Safe to call more than once; the handler is only attached the first time.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("task_service")
    logger.setLevel(level)

    if any(getattr(h, "_task_service", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._task_service = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
