"""
Environment helpers.

Developers often keep local overrides (log level, timeouts) in a `.env` file next to
their project. `load_dotenv_if_present()` loads it once without clobbering variables
already set in the process environment.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None).

    `ENDPOINTKIT_ENV_FILE` points at an explicit file; otherwise the nearest `.env`
    above the current working directory is used.
    """
    explicit = os.getenv("ENDPOINTKIT_ENV_FILE")
    if explicit:
        env_path = Path(explicit).expanduser().resolve()
        if env_path.is_file():
            load_dotenv(dotenv_path=env_path, override=False)
            return env_path
        return None

    found = find_dotenv(usecwd=True)
    if not found:
        return None
    load_dotenv(dotenv_path=found, override=False)
    return Path(found)
