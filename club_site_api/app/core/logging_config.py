"""
Process-wide log output.

All modules log through ``logging.getLogger(__name__)`` and never add
handlers themselves; :func:`setup_logging` is the one place that decides
where records go.  Uvicorn installs handlers of its own on startup, so
those are removed and its records propagate to the root logger instead,
giving server and application lines the same shape::

    2023-05-15 19:30:00 [INFO] club_site_api.app.core.storage: Created player 1
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        path = Path(logfile).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def _route_uvicorn_to_root() -> None:
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send log records to stderr and, when ``logfile`` is set, to that file.

    Nothing happens if the root logger already has handlers, so
    building several applications in one process configures logging
    only the first time.  ``level`` is a level name in any case;
    unknown names mean ``INFO``.
    """
    if logging.getLogger().handlers:
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=_handlers(logfile),
    )
    _route_uvicorn_to_root()
