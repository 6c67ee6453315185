from __future__ import annotations

"""Central logging configuration for treeview_sync.

Import and call :func:`setup_logging` once at application start-up. The
engine modules only ever obtain loggers; they never configure handlers.
"""

import logging
import logging.config
import os

from treeview_sync.config import ConfigManager

__all__ = ["setup_logging"]

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging() -> None:
    """Configure logging using the ``logging`` section of the YAML config."""
    log_dir = os.environ.get("TREEVIEW_SYNC_LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "engine.log")

    logging_config = ConfigManager().get_logging_config()
    if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
        logging_config = dict(logging_config)
        handlers = {name: dict(handler_cfg) for name, handler_cfg in (logging_config.get("handlers") or {}).items()}
        if "file" in handlers:
            handlers["file"]["filename"] = log_file
        logging_config["handlers"] = handlers
        try:
            logging.config.dictConfig(logging_config)
            logging.getLogger("treeview_sync").info("===== Logging initialised from config files =====")
        except (ValueError, TypeError, AttributeError, ImportError) as exc:
            _setup_minimal_logging()
            logging.getLogger("treeview_sync").error("Invalid logging config, using fallback: %s", exc)
    else:
        _setup_minimal_logging()
        logging.getLogger("treeview_sync").warning(
            "===== Logging initialised with minimal fallback (no config) ====="
        )

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Set up console-only logging when config is unavailable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': _FORMAT,
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }
    logging.config.dictConfig(minimal_config)


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    ``TREEVIEW_SYNC_DEBUG_MODULES=comma,separated,logger,names`` sets DEBUG
    on each listed logger and makes sure one of its handlers emits DEBUG.
    """
    extra_modules = os.environ.get('TREEVIEW_SYNC_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        has_debug_handler = any(
            h.level == logging.NOTSET or h.level <= logging.DEBUG for h in logger.handlers
        )
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
