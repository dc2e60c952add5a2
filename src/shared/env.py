"""
Docker secret resolution.

Any ``KEY_FILE`` variable pointing at a readable file provides the value of
``KEY`` unless ``KEY`` is already set. This lets ``DB_MONGO_URI_FILE`` or
``EVENTS_BROKER_URL_FILE`` carry credentials without exposing them in the
environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, MutableMapping, Optional

import structlog

logger = structlog.get_logger(__name__)

SECRET_SUFFIX = "_FILE"


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Expose the content of ``*_FILE`` secrets as environment variables.

    Args:
        environ: Mapping to read and update, ``os.environ`` by default

    Returns:
        The variables that were set, by name
    """
    env = os.environ if environ is None else environ
    resolved: Dict[str, str] = {}

    for key, file_path in list(env.items()):
        if not key.endswith(SECRET_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_SUFFIX)]
        if env.get(target_key):
            continue
        try:
            value = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.unreadable", key=key, path=file_path, error=str(exc)
            )
            continue
        env[target_key] = value
        resolved[target_key] = value

    return resolved
