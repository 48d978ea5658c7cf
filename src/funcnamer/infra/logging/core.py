from __future__ import annotations

"""
Logging Core Orchestrator.

Attaches the console and optional rotating file handlers directly to the
root logger. Every handler installed here is tagged, so reconfiguring or
resetting only touches our own handlers and leaves those installed by
test runners or embedding applications alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List

from funcnamer.infra.logging.config import DATE_FORMAT, FILE_FORMAT, LoggingConfig

_HANDLER_TAG_ATTR: str = "_funcnamer_handler"
_CONFIGURED_FLAG_ATTR: str = "_funcnamer_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once.

    Args:
        cfg: Verbosity switches and log file settings.
        force: Replace a previous configuration instead of keeping it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    reset_logging()
    root.setLevel(cfg.level)

    for handler in _build_handlers(cfg):
        handler.setLevel(cfg.level)
        setattr(handler, _HANDLER_TAG_ATTR, True)
        root.addHandler(handler)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def reset_logging() -> None:
    """Detach and close every handler installed by configure_logging."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG_ATTR, False):
            root.removeHandler(handler)
            handler.close()
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _build_handlers(cfg: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(cfg.console_format))
        handlers.append(console)

    if cfg.log_file:
        try:
            os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
            rotating = RotatingFileHandler(
                cfg.log_file,
                maxBytes=cfg.rotate_bytes,
                backupCount=cfg.rotate_count,
                encoding="utf-8",
            )
        except OSError as e:
            # The console is still usable; a missing log file is not fatal
            sys.stderr.write(f"WARNING: can't open log file '{cfg.log_file}': {e}\n")
        else:
            rotating.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
            handlers.append(rotating)

    return handlers
