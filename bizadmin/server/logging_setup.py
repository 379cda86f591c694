import logging
from typing import Optional

from bizadmin.server.settings.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once (app start or CLI).
    Later calls are no-ops, so uvicorn reloads and tests can call it freely.
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
    _configured = True
