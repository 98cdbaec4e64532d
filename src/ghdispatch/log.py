#!/usr/bin/env python3
"""
log - File logging for ghdispatch sessions.

Console output is plain print() text; this logger keeps a timestamped record
of what was dispatched (and what failed) on disk.
"""

import os
import logging
import tempfile
from pathlib import Path
from typing import Optional


class SessionLogger:
    """Simple file logger for dispatch sessions."""

    def __init__(self, name: str = "ghdispatch", log_dir: Optional[Path] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        self.log_file: Optional[Path] = None

        # Drop handlers left over from a previous session in this process
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if log_dir is None:
            # Try /var/log first, fall back to the temp dir
            log_dir = Path("/var/log")
            if not log_dir.exists() or not os.access(log_dir, os.W_OK):
                log_dir = Path(tempfile.gettempdir())
        log_dir = Path(log_dir)

        log_file = log_dir / f"{name}.log"
        error_file = log_dir / f"{name}_errors.log"

        try:
            log_dir.mkdir(parents=True, exist_ok=True)

            fh = logging.FileHandler(log_file)
            fh.setLevel(logging.INFO)

            eh = logging.FileHandler(error_file)
            eh.setLevel(logging.ERROR)

            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s',
                                          datefmt='%Y-%m-%d %H:%M:%S')
            fh.setFormatter(formatter)
            eh.setFormatter(formatter)

            self.logger.addHandler(fh)
            self.logger.addHandler(eh)
            self.log_file = log_file
        except OSError:
            # If logging setup fails, continue without file logging
            self.logger.addHandler(logging.NullHandler())

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)

    def close(self):
        """Flush and detach the file handlers."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
