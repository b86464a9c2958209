import logging
import threading
from logging.handlers import TimedRotatingFileHandler

from config_loader import CONFIG

LOGGER_NAME = "ed25519_verify"
_FORMAT = logging.Formatter('[%(asctime)s] %(levelname)s %(name)s - %(message)s')
_configured = False
_handler: logging.Handler | None = None
_lock = threading.Lock()


def _build_handler(config) -> logging.Handler:
    """Return a rotating file handler when a log file is configured, else stderr."""
    if config.log_file is None:
        return logging.StreamHandler()
    config.log_file.parent.mkdir(parents=True, exist_ok=True)
    return TimedRotatingFileHandler(
        str(config.log_file),
        when=config.log_when,
        backupCount=config.log_backup_count,
    )


def _configure() -> None:
    global _configured, _handler
    with _lock:
        if _configured:
            return
        _handler = _build_handler(CONFIG)
        _handler.setFormatter(_FORMAT)
        base = logging.getLogger(LOGGER_NAME)
        base.setLevel(CONFIG.log_level)
        base.addHandler(_handler)
        # records already go to our handler; root would print them a second time
        base.propagate = False
        _configured = True


def reset_logging() -> None:
    """Detach the configured handler so the next get_logger() reconfigures (for tests)."""
    global _configured, _handler
    with _lock:
        base = logging.getLogger(LOGGER_NAME)
        if _handler is not None:
            base.removeHandler(_handler)
            _handler.close()
        base.propagate = True
        _handler = None
        _configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ed25519_verify hierarchy after configuring logging."""
    _configure()
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
