"""
Type-safe wrappers for Discord identifiers.

Guild and user snowflakes are 64-bit integers but are stored as strings so
they survive a round trip through JSON without precision loss. The wrappers
compare equal to each other, to ints and to numeric strings, which lets the
warning store match ids regardless of how the caller obtained them.
"""

from __future__ import annotations

from typing import Union

import discord


class Snowflake:
    """
    Base for Discord snowflake id wrappers.

    Attributes:
        _value (str): The snowflake ID stored as a string for JSON parity.

    Example:
        >>> gid = GuildID(123456789012345678)
        >>> gid.to_int()
        123456789012345678
        >>> str(gid)
        '123456789012345678'
        >>> GuildID("123456789012345678") == 123456789012345678
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[str, int, "Snowflake"]) -> None:
        """
        Initialize from a string, int, or another wrapper of the same kind.

        Raises:
            ValueError: If the value cannot be converted to a valid snowflake.
        """
        if isinstance(value, type(self)):
            self._value = value._value
        elif isinstance(value, bool):
            raise ValueError(f"Cannot create {type(self).__name__} from bool: {value}")
        elif isinstance(value, int):
            if value < 0:
                raise ValueError(f"Snowflake cannot be negative: {value}")
            self._value = str(value)
        elif isinstance(value, str):
            # Validate that it's a valid integer string
            self._value = str(int(value.strip()))
            if self._value.startswith("-"):
                raise ValueError(f"Snowflake cannot be negative: {value}")
        else:
            raise ValueError(f"Cannot create {type(self).__name__} from {type(value).__name__}: {value}")

    @classmethod
    def from_int(cls, value: int):
        return cls(value)

    def to_int(self) -> int:
        """Convert to an integer for Discord API calls."""
        return int(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __str__(self) -> str:
        """Return the string representation for JSON serialization."""
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, type(self)):
            return self._value == other._value
        if isinstance(other, bool):
            return NotImplemented
        if isinstance(other, str):
            return self._value == other
        if isinstance(other, int):
            return self._value == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


class UserID(Snowflake):
    """Discord user snowflake ID."""

    __slots__ = ()

    @classmethod
    def from_user(cls, member: Union[discord.Member, discord.User]) -> "UserID":
        """Create a UserID from a Discord Member or User object."""
        return cls(member.id)


class GuildID(Snowflake):
    """Discord guild snowflake ID."""

    __slots__ = ()

    @classmethod
    def from_guild(cls, guild: discord.Guild) -> "GuildID":
        """Create a GuildID from a Discord Guild object."""
        return cls(guild.id)


def coerce_snowflake(value: Union[str, int, Snowflake], cls: type[Snowflake]) -> Union[Snowflake, str]:
    """
    Normalize an identifier for equality lookups.

    Wrappers of ``cls``, non-negative ints and strings of ASCII digits become
    ``cls`` instances so ``123``, ``"123"`` and ``cls(123)`` all resolve to the
    same record. Any other string is kept exactly as given, and a negative int
    is kept as its decimal string, so ``-5`` and ``"-5"`` share a record.

    Raises:
        ValueError: If ``value`` is a bool, an empty string or not an id at all.
    """
    if isinstance(value, cls):
        return value
    if isinstance(value, str):
        if value.isascii() and value.isdigit():
            return cls(value)
        if not value:
            raise ValueError(f"{cls.__name__} token cannot be empty")
        return value
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        return str(value)
    return cls(value)


class DiscordUsername:
    """
    Type-safe wrapper for Discord display names.

    Empty or non-string values fall back to ``DEFAULT_USERNAME`` so a summary
    can always be rendered.

    Example:
        >>> str(DiscordUsername("Alice"))
        'Alice'
        >>> str(DiscordUsername(""))
        'Unknown User'
    """

    __slots__ = ("_value",)

    DEFAULT_USERNAME = "Unknown User"

    def __init__(self, value: Union[str, "DiscordUsername", None]) -> None:
        if isinstance(value, DiscordUsername):
            self._value = value._value
        elif isinstance(value, str):
            self._value = value.strip() or self.DEFAULT_USERNAME
        else:
            self._value = self.DEFAULT_USERNAME

    @classmethod
    def from_user(cls, member: Union[discord.Member, discord.User]) -> "DiscordUsername":
        """Use the account name (``member.name``), not the guild nickname."""
        return cls(member.name)

    @classmethod
    def unknown(cls) -> "DiscordUsername":
        return cls(cls.DEFAULT_USERNAME)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"DiscordUsername({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DiscordUsername):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)
