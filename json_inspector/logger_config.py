import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Handlers installed by setup_logger, per logger name.
_installed: Dict[str, List[logging.Handler]] = {}


def setup_logger(name: str, level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Attach console (and optionally file) handlers to a logger.

    Calling it again for the same logger replaces the handlers it added
    before instead of stacking duplicates.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in _installed.pop(name, []):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    _installed[name] = handlers

    return logger
