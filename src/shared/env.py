"""Environment utilities for resolving secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"


def _read_secret(key: str, file_path: str) -> str | None:
    try:
        return Path(file_path).read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        reason = "env.secret_file.missing"
        error = exc
    except UnicodeDecodeError as exc:
        reason = "env.secret_file.decode_failed"
        error = exc
    except OSError as exc:
        reason = "env.secret_file.load_failed"
        error = exc
    logger.warning(reason, extra={"key": key, "path": file_path, "error": str(error)})
    return None


def load_secret_file_variables() -> List[str]:
    """
    Expose Docker secrets as plain environment variables.

    ``DB_MONGO_URI_FILE=/run/secrets/mongo_uri`` makes the file content
    available as ``DB_MONGO_URI`` unless that variable is already set.
    Unreadable files are logged and skipped.

    Returns:
        The names of the variables that were populated.
    """
    loaded: List[str] = []
    for key, file_path in list(os.environ.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not file_path:
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if os.environ.get(target_key):
            continue
        value = _read_secret(key, file_path)
        if value is None:
            continue
        os.environ[target_key] = value
        loaded.append(target_key)
    return loaded


load_secret_file_variables()
