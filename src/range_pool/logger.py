# range_pool/logger.py
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from datetime import datetime
from typing import Optional


def setup_logger(
    log_dir: str | Path | None = None,
    *,
    level: int = logging.INFO,
    filename_prefix: str = "range_pool",
    console: bool = True,
    rotate: bool = False,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 3,
    force: bool = False,
) -> Optional[Path]:
    """
    Configure root logging for an application that drives a range pool.

    Writes a timestamped log file into ``log_dir`` when one is given, and
    echoes to stderr when ``console`` is set. Returns the log file path, or
    None when no file is written. Safe to call once at process start.
    """
    root = logging.getLogger()
    if force:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()

    root.setLevel(level)

    fmt = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    log_path: Optional[Path] = None
    if log_dir is not None:
        directory = Path(log_dir).expanduser()
        directory.mkdir(parents=True, exist_ok=True)

        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = directory / f"{filename_prefix}_{ts}.log"

        if rotate:
            fhandler = RotatingFileHandler(
                log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        else:
            fhandler = logging.FileHandler(log_path, mode="w", encoding="utf-8")

        fhandler.setLevel(level)
        fhandler.setFormatter(fmt)
        root.addHandler(fhandler)

    if console:
        shandler = logging.StreamHandler()
        shandler.setLevel(level)
        shandler.setFormatter(fmt)
        root.addHandler(shandler)

    if log_path is not None:
        root.info("Logging to: %s", str(log_path))
    return log_path
