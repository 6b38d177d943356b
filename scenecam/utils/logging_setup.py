# scenecam/utils/logging_setup.py
from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional

from scenecam.utils import settings


def configure_logging(level: Optional[int] = None, *, log_to_file: bool = False) -> None:
    """
    Configure root logging with a readable format and optional file sink.
    Silences noisy third-party loggers by default.
    """
    if level is None:
        level = settings.LOG_LEVEL
    fmt = settings.LOG_FORMAT
    datefmt = settings.LOG_DATEFMT
    logging.basicConfig(level=level, format=fmt, datefmt=datefmt)
    logging.getLogger().setLevel(level)

    # Tone down chatty libraries
    for noisy in ("PIL", "matplotlib", "numpy", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if log_to_file:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d-%H%M%S")
        fh = logging.FileHandler(os.path.join(settings.LOG_DIR, f"scenecam-{ts}.log"), encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(fmt, datefmt))
        logging.getLogger().addHandler(fh)
