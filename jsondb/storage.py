"""Whole-file JSON persistence for a store."""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from config.settings import JSON_INDENT
from jsondb.errors import CorruptStore, NotFound

logger = logging.getLogger(__name__)


def _file_mode(path: Path) -> int:
    """Permission bits to give the rewritten file."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def read(file_name: str | Path) -> Any:
    """Parse and return the JSON content of ``file_name``."""
    return json.loads(Path(file_name).read_text(encoding="utf-8"))


def write(file_name: str | Path, data: Any) -> None:
    """Serialize ``data`` to ``file_name``, replacing it in one step."""
    path = Path(file_name)
    payload = json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
    mode = _file_mode(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def load(path: Path) -> dict:
    """Load the full store, checking that it is a single JSON object."""
    try:
        data = read(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CorruptStore(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise CorruptStore(f"{path} must contain a JSON object, found {type(data).__name__}.")
    logger.debug("Loaded %d key(s) from %s", len(data), path)
    return data


def save(path: Path, data: dict) -> None:
    write(path, data)
    logger.debug("Saved %d key(s) to %s", len(data), path)


def ensure_exists(path: Path) -> bool:
    """Create ``path`` holding an empty object if it is missing.

    Returns True when the file was created.
    """
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    write(path, {})
    logger.info("Created store %s", path)
    return True


def destroy(path: Path) -> None:
    """Delete the backing file."""
    try:
        path.unlink()
    except FileNotFoundError as exc:
        raise NotFound(f"Store file {path} does not exist.") from exc
    logger.info("Destroyed store %s", path)
