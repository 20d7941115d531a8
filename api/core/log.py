from __future__ import annotations

import logging

from core import settings


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
