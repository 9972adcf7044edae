"""
Record types for the per-guild warning history.

The hierarchy, outermost to innermost:

- ``GuildWarnings``: one guild and the users warned in it.
- ``UserWarnings``: one user's identity, cached warning count and warnings.
- ``WarningEntry``: a single free-text reason.

``WarnedUser`` is the identity stored on each ``UserWarnings``. It carries the
display name used when rendering a summary, but equality only looks at the id
so renamed users keep their history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

import discord

from modwarn.datatypes.discord_datatypes import (
    DiscordUsername,
    GuildID,
    UserID,
    coerce_snowflake,
)

GuildKey = Union[GuildID, str]
UserKey = Union[UserID, str]


@dataclass(frozen=True, slots=True)
class WarningEntry:
    """A single warning. Only the reason is recorded."""

    reason: str


@dataclass(slots=True, eq=False)
class WarnedUser:
    """Identity of a warned user.

    Attributes:
        user_id: Discord user id (or an opaque token for non-Discord callers).
        name: Display name rendered in summaries.
        discriminator: Legacy ``#1234`` discriminator, if the account has one.
        bot: Whether the account is a bot.
    """

    user_id: UserKey
    name: DiscordUsername
    discriminator: Optional[str] = None
    bot: bool = False

    def __post_init__(self) -> None:
        self.user_id = coerce_snowflake(self.user_id, UserID)
        self.name = DiscordUsername(self.name)

    @classmethod
    def from_member(cls, member: Union[discord.Member, discord.User]) -> "WarnedUser":
        discriminator = getattr(member, "discriminator", None)
        # Accounts migrated to unique usernames report "0"
        if discriminator in ("0", "0000", ""):
            discriminator = None
        return cls(
            user_id=UserID.from_user(member),
            name=DiscordUsername.from_user(member),
            discriminator=discriminator,
            bot=bool(getattr(member, "bot", False)),
        )

    @classmethod
    def coerce(cls, value: Union["WarnedUser", UserKey, int]) -> "WarnedUser":
        """Wrap a bare id into an identity whose name is the id itself."""
        if isinstance(value, WarnedUser):
            return value
        return cls(user_id=value, name=str(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WarnedUser):
            return NotImplemented
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)


@dataclass(slots=True)
class UserWarnings:
    """One user's warning history within a guild.

    ``warning_count`` mirrors ``len(warnings)``; both are only changed through
    :meth:`add`.
    """

    user: WarnedUser
    warning_count: int = 0
    warnings: List[WarningEntry] = field(default_factory=list)

    def add(self, reason: str) -> WarningEntry:
        entry = WarningEntry(reason)
        self.warnings.append(entry)
        self.warning_count += 1
        return entry

    @property
    def reasons(self) -> List[str]:
        return [warning.reason for warning in self.warnings]

    def format_summary(self) -> str:
        return format_summary(self)

    def __str__(self) -> str:
        return format_summary(self)


@dataclass(slots=True)
class GuildWarnings:
    """All warned users of one guild, in the order they were first warned."""

    guild_id: GuildKey
    users: List[UserWarnings] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.guild_id = coerce_snowflake(self.guild_id, GuildID)

    def find_user(self, user_id: UserKey) -> Optional[UserWarnings]:
        for user_warnings in self.users:
            if user_warnings.user.user_id == user_id:
                return user_warnings
        return None


def format_summary(user_warnings: UserWarnings) -> str:
    """Render a user's warning history as chat-ready text.

    A user "Bob" warned for "spam" then "flood" renders as::

        User Bob has 2 warning(s):
        1: spam
        2: flood

    With no warnings only the first line is produced, without the colon.
    """
    buffer = f"User {user_warnings.user.name} has {user_warnings.warning_count} warning(s)"

    if user_warnings.warning_count > 0:
        buffer += ":\n"
        for index, warning in enumerate(user_warnings.warnings, start=1):
            buffer += f"{index}: {warning.reason}\n"

    return buffer
