"""Resolve ``KEY_FILE`` environment variables into ``KEY`` (Docker secrets)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def load_secret_file_variables() -> None:
    """
    Expose the contents of every ``KEY_FILE`` file as ``KEY``.

    This lets ``GITHUB_TOKEN_FILE=/run/secrets/github_token`` stand in for
    ``GITHUB_TOKEN``. An already-set ``KEY`` wins. Unreadable files are logged
    and skipped.
    """

    for key, file_path in list(os.environ.items()):
        if not key.endswith("_FILE") or not file_path:
            continue
        target_key = key[: -len("_FILE")]
        if os.environ.get(target_key):
            continue
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
