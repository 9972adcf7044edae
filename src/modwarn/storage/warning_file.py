"""
JSON file persistence for the warning store.

``save_warnings`` overwrites the whole file on every call; ``load_warnings``
rebuilds a store from it. Failures are raised as the typed errors in
:mod:`modwarn.storage.errors`, each chained to the underlying exception.
Loading never falls back to an empty store; that decision belongs to the
caller.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from modwarn.storage.errors import (
    WarningsFileNotFoundError,
    WarningsParseError,
    WarningsReadError,
    WarningsWriteError,
)
from modwarn.storage.warning_serialization import guilds_from_dict, store_to_dict
from modwarn.util.logger import get_logger

if TYPE_CHECKING:
    from modwarn.storage.warning_store import WarningStore

logger = get_logger("warning_file")

PathLike = Union[str, Path]


def save_warnings(store: "WarningStore", path: PathLike, indent: Optional[int] = None) -> None:
    """Serialize ``store`` to ``path``, creating parent directories as needed.

    Raises:
        WarningsWriteError: If the directory or the file cannot be written.
    """
    path = Path(path)
    serialized = json.dumps(store_to_dict(store), indent=indent, ensure_ascii=False)

    try:
        if not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialized, encoding="utf-8")
    except OSError as exc:
        logger.error("[WARNING FILE] Failed to save warnings to %s: %s", path, exc)
        raise WarningsWriteError(path, str(exc)) from exc

    logger.debug("[WARNING FILE] Saved %d guild(s) to %s", len(store.guilds), path)


def load_warnings(path: PathLike) -> "WarningStore":
    """Read a store back from ``path``.

    Raises:
        WarningsFileNotFoundError: ``path`` is not an existing regular file.
        WarningsReadError: The file exists but could not be read or decoded.
        WarningsParseError: The content is not a serialized store.
    """
    from modwarn.storage.warning_store import WarningStore

    path = Path(path)
    if not path.is_file():
        raise WarningsFileNotFoundError(path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("[WARNING FILE] Failed to read %s: %s", path, exc)
        raise WarningsReadError(path, str(exc)) from exc

    try:
        guilds = guilds_from_dict(json.loads(raw))
    except (ValueError, RecursionError) as exc:
        # json.JSONDecodeError is a ValueError subclass; deep nesting overflows the decoder
        logger.error("[WARNING FILE] Failed to parse %s: %s", path, exc)
        raise WarningsParseError(path, str(exc)) from exc

    logger.debug("[WARNING FILE] Loaded %d guild(s) from %s", len(guilds), path)
    return WarningStore(guilds=guilds)
