from __future__ import annotations
from pathlib import Path
import fcntl
from typing import Any, Dict
import yaml

from modwarn.util.logger import get_logger

logger = get_logger("app_configuration")


CONFIG_PATH = Path("./config/app_config.yml").resolve()

DEFAULT_WARNINGS_FILE = Path("data/warnings.json")
DEFAULT_MODERATOR_PERMISSION = "moderate_members"


class AppConfig:
    """File-lock based accessor around the YAML application configuration.

    The class caches the contents of ``./config/app_config.yml`` and exposes
    the warning store settings through typed properties. A missing or
    malformed file leaves the cache empty so every property falls back to its
    default.
    """

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        self._data: Dict[str, Any] = {}
        self.reload()

    # --------------------------
    # Private helpers
    # --------------------------
    def load_from_disk(self) -> Dict[str, Any]:
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                try:
                    data = yaml.safe_load(f)
                finally:
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except FileNotFoundError:
            logger.error("[APP CONFIGURATION] Config file %s not found.", self.config_path)
            return {}
        except (OSError, yaml.YAMLError) as exc:
            logger.error("[APP CONFIGURATION] Failed to load config %s: %s", self.config_path, exc)
            return {}

        if not isinstance(data, dict):
            if data is not None:
                logger.error("[APP CONFIGURATION] Config %s is not a mapping; ignoring it.", self.config_path)
            return {}
        return data

    def _warnings_section(self) -> Dict[str, Any]:
        section = self._data.get("warnings", {})
        return section if isinstance(section, dict) else {}

    # --------------------------
    # Public API
    # --------------------------
    def reload(self) -> Dict[str, Any]:
        """Re-read the YAML file, replace the cache and return the loaded mapping."""
        self._data = self.load_from_disk()
        return self._data

    @property
    def data(self) -> Dict[str, Any]:
        """The cached configuration mapping. Callers should not mutate it."""
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    # --------------------------
    # High-level shortcuts
    # --------------------------
    @property
    def warnings_file(self) -> Path:
        """Path of the JSON file holding every guild's warnings."""
        value = self._warnings_section().get("file_path")
        return Path(value) if value else DEFAULT_WARNINGS_FILE

    @property
    def warnings_indent(self) -> int | None:
        """JSON indent used when saving; ``None`` writes compact output."""
        value = self._warnings_section().get("indent")
        if value is None:
            return None
        try:
            indent = int(value)
        except (TypeError, ValueError):
            logger.warning("[APP CONFIGURATION] Ignoring invalid warnings.indent %r", value)
            return None
        return indent if indent >= 0 else None

    @property
    def moderator_permission(self) -> str:
        """Guild permission required to issue or view warnings."""
        value = self._warnings_section().get("moderator_permission")
        return str(value) if value else DEFAULT_MODERATOR_PERMISSION


# Shared application-wide configuration instance
app_config = AppConfig(CONFIG_PATH)
