# tickerview/logs.py
from __future__ import annotations

import logging

from tickerview.config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def init_logging(level: str | None = None) -> None:
    root = logging.getLogger()
    root.setLevel((level or LOG_LEVEL).upper())

    # Streamlit reruns the script on every interaction, only attach once
    if not any(getattr(h, "_tickerview", False) for h in root.handlers):
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(_FORMAT))
        ch._tickerview = True
        root.addHandler(ch)
