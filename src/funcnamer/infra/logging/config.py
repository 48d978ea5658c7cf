from __future__ import annotations

"""
Logging Configuration Model.

The CLI exposes two verbosity switches; this model turns them into the
root level and the console format, and carries the optional rotating log
file settings.
"""

import logging
from dataclasses import dataclass
from typing import Optional

# Log file records are self-describing, console records are not
FILE_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging setup for one CLI invocation.

    Attributes:
        quiet: Hide per-file progress (INFO) and keep warnings and errors.
        debug: Show DEBUG records; wins over quiet.
        console: Attach the stderr handler.
        log_file: Optional path of a rotating log file.
        rotate_bytes: Size at which the log file rolls over.
        rotate_count: Number of rolled-over files kept.
    """
    quiet: bool = False
    debug: bool = False
    console: bool = True
    log_file: Optional[str] = None

    rotate_bytes: int = 1024 * 1024
    rotate_count: int = 2

    @property
    def level(self) -> int:
        if self.debug:
            return logging.DEBUG
        if self.quiet:
            return logging.WARNING
        return logging.INFO

    @property
    def console_format(self) -> str:
        """Bare progress lines, or level and logger name when debugging."""
        if self.debug:
            return "%(levelname)s %(name)s: %(message)s"
        return "%(message)s"
