import json
import logging
from logging.handlers import RotatingFileHandler
from typing import Any, List, Optional


def log_line(data: Any, as_json: bool = False) -> None:
    """Print a data object either as raw text or JSON."""
    if as_json:
        try:
            print(json.dumps(data, ensure_ascii=False))
        except TypeError:
            print(json.dumps(str(data), ensure_ascii=False))
    else:
        print(data)


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """Log to stderr and, if given, to a rotating ``log_file``."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(RotatingFileHandler(log_file, maxBytes=10_000_000, backupCount=3))
    logging.basicConfig(
        level=logging.INFO if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=handlers,
        force=True,
    )
