"""
In-memory warning store.

Guilds and users are kept in insertion order and looked up with a linear
equality scan. Ids are normalized with ``coerce_snowflake`` first, so
``123``, ``"123"`` and ``GuildID(123)`` all address the same guild, while
non-numeric tokens are matched as plain strings.

The store performs no I/O of its own; :meth:`WarningStore.save` and
:meth:`WarningStore.load` delegate to :mod:`modwarn.storage.warning_file`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from modwarn.datatypes.discord_datatypes import GuildID, UserID, coerce_snowflake
from modwarn.datatypes.warning_datatypes import (
    GuildKey,
    GuildWarnings,
    UserKey,
    UserWarnings,
    WarnedUser,
)
from modwarn.storage.warning_file import load_warnings, save_warnings


@dataclass(slots=True)
class WarningStore:
    """Every guild with at least one warned user."""

    guilds: List[GuildWarnings] = field(default_factory=list)

    def find_guild(self, guild_id: Union[GuildKey, int]) -> Optional[GuildWarnings]:
        key = coerce_snowflake(guild_id, GuildID)
        for guild in self.guilds:
            if guild.guild_id == key:
                return guild
        return None

    def add_warning(
        self,
        guild_id: Union[GuildKey, int],
        user: Union[WarnedUser, UserKey, int],
        reason: str,
    ) -> None:
        """Record a warning, creating the guild and user entries on first use.

        Calling this twice with the same arguments records two warnings.
        """
        identity = WarnedUser.coerce(user)

        guild = self.find_guild(guild_id)
        if guild is None:
            guild = GuildWarnings(guild_id=guild_id)
            self.guilds.append(guild)

        user_warnings = guild.find_user(identity.user_id)
        if user_warnings is None:
            user_warnings = UserWarnings(user=identity)
            guild.users.append(user_warnings)

        user_warnings.add(reason)

    def get_warnings(
        self,
        guild_id: Union[GuildKey, int],
        user: Union[WarnedUser, UserKey, int],
    ) -> Optional[UserWarnings]:
        """Return a copy of the user's record in the guild, or ``None`` if never warned there.

        Changing the copy does not touch the store; use :meth:`add_warning`.
        """
        guild = self.find_guild(guild_id)
        if guild is None:
            return None

        if isinstance(user, WarnedUser):
            user_id = user.user_id
        else:
            user_id = coerce_snowflake(user, UserID)
        user_warnings = guild.find_user(user_id)
        if user_warnings is None:
            return None
        return copy.deepcopy(user_warnings)

    def save(self, path: Union[str, Path], indent: Optional[int] = None) -> None:
        save_warnings(self, path, indent=indent)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "WarningStore":
        return load_warnings(path)
