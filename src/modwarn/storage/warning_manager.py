"""
Process-wide owner of the warning store.

Provides the API the command layer uses:
- load(): read the warnings file at startup
- warn(guild_id, user, reason) -> UserWarnings: record and persist a warning
- lookup(guild_id, user) -> UserWarnings | None
- summary(guild_id, user) -> str
- save(): explicit persist trigger

Each ``warn`` call runs a full mutate-then-save cycle synchronously, so calls
made from the event loop never interleave.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from modwarn.configuration.app_configuration import app_config
from modwarn.datatypes.warning_datatypes import UserWarnings, WarnedUser, UserKey, GuildKey
from modwarn.storage.errors import WarningsFileNotFoundError
from modwarn.storage.warning_store import WarningStore
from modwarn.util.logger import get_logger

logger = get_logger("warning_manager")


class WarningManager:
    """Owns one :class:`WarningStore` and the file backing it."""

    def __init__(self, path: Union[str, Path], indent: Optional[int] = None) -> None:
        self.path = Path(path)
        self.indent = indent
        self.store = WarningStore()
        self._loaded = False

        logger.info("[WARNING MANAGER] Initialized with %s", self.path)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> WarningStore:
        """Load the warnings file, starting empty only when it does not exist.

        Read and parse errors propagate so a corrupt file is never silently
        replaced by an empty history.
        """
        try:
            self.store = WarningStore.load(self.path)
        except WarningsFileNotFoundError:
            logger.warning("[WARNING MANAGER] %s not found; starting with no warnings", self.path)
            self.store = WarningStore()
        self._loaded = True

        logger.info("[WARNING MANAGER] Loaded warnings for %d guild(s)", len(self.store.guilds))
        return self.store

    def save(self) -> None:
        self.store.save(self.path, indent=self.indent)

    def warn(
        self,
        guild_id: Union[GuildKey, int],
        user: Union[WarnedUser, UserKey, int],
        reason: str,
    ) -> UserWarnings:
        """Record a warning, persist the store and return the user's record.

        The warning stays in memory even if saving fails; the write error is
        raised to the caller.
        """
        self.store.add_warning(guild_id, user, reason)
        user_warnings = self.store.get_warnings(guild_id, user)
        if user_warnings is None:
            raise RuntimeError(f"Warning for user {user} in guild {guild_id} was not recorded")

        logger.info(
            "[WARNING MANAGER] Warned user %s in guild %s (%d total)",
            user_warnings.user.user_id, guild_id, user_warnings.warning_count,
        )
        self.save()
        return user_warnings

    def lookup(
        self,
        guild_id: Union[GuildKey, int],
        user: Union[WarnedUser, UserKey, int],
    ) -> Optional[UserWarnings]:
        return self.store.get_warnings(guild_id, user)

    def summary(self, guild_id: Union[GuildKey, int], user: WarnedUser) -> str:
        """Render the user's history; users with no record report zero warnings."""
        user_warnings = self.lookup(guild_id, user)
        if user_warnings is None:
            user_warnings = UserWarnings(user=user)
        return user_warnings.format_summary()


def build_warning_manager() -> WarningManager:
    """Create a manager from the shared application configuration."""
    return WarningManager(app_config.warnings_file, indent=app_config.warnings_indent)


# Shared application-wide warning manager
warning_manager = build_warning_manager()
