#!/usr/bin/env python
"""Script to run the task service."""
import uvicorn

from task_service.config import HOST, LOG_LEVEL, PORT
from task_service.logging_setup import setup_logging

if __name__ == "__main__":
    setup_logging(LOG_LEVEL)
    uvicorn.run(
        "task_service.main:app",
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
    )
