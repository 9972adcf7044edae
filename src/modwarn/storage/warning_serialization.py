"""
Conversion between warning records and JSON-compatible mappings.

The file format uses camelCase keys::

    {"guilds": [{"id": "1", "users": [{"user": {...}, "warningCount": 1,
                                      "warnings": [{"reason": "spam"}]}]}]}

Ids are written as strings; ints are accepted when reading. Every decoder
raises ``ValueError`` with a path-like location on malformed input so the
persistence layer can report it as a parse failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

from modwarn.datatypes.warning_datatypes import (
    GuildWarnings,
    UserWarnings,
    WarnedUser,
    WarningEntry,
)

if TYPE_CHECKING:
    from modwarn.storage.warning_store import WarningStore


# ---------- encoding ----------

def warned_user_to_dict(user: WarnedUser) -> Dict[str, Any]:
    return {
        "id": str(user.user_id),
        "name": str(user.name),
        "discriminator": user.discriminator,
        "bot": user.bot,
    }


def user_warnings_to_dict(user_warnings: UserWarnings) -> Dict[str, Any]:
    return {
        "user": warned_user_to_dict(user_warnings.user),
        "warningCount": user_warnings.warning_count,
        "warnings": [{"reason": warning.reason} for warning in user_warnings.warnings],
    }


def guild_warnings_to_dict(guild: GuildWarnings) -> Dict[str, Any]:
    return {
        "id": str(guild.guild_id),
        "users": [user_warnings_to_dict(user) for user in guild.users],
    }


def store_to_dict(store: "WarningStore") -> Dict[str, Any]:
    return {"guilds": [guild_warnings_to_dict(guild) for guild in store.guilds]}


# ---------- decoding ----------

def _require(mapping: Any, key: str, expected: type | tuple[type, ...], where: str) -> Any:
    if not isinstance(mapping, dict):
        raise ValueError(f"{where}: expected an object, got {type(mapping).__name__}")
    if key not in mapping:
        raise ValueError(f"{where}: missing field `{key}`")
    value = mapping[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ValueError(f"{where}.{key}: invalid type {type(value).__name__}")
    return value


def _require_list(mapping: Any, key: str, where: str) -> List[Any]:
    return _require(mapping, key, list, where)


def warned_user_from_dict(data: Any, where: str = "user") -> WarnedUser:
    user_id = _require(data, "id", (str, int), where)
    name = _require(data, "name", str, where)

    discriminator = data.get("discriminator")
    if discriminator is not None and not isinstance(discriminator, str):
        raise ValueError(f"{where}.discriminator: invalid type {type(discriminator).__name__}")

    bot = data.get("bot", False)
    if not isinstance(bot, bool):
        raise ValueError(f"{where}.bot: invalid type {type(bot).__name__}")

    try:
        return WarnedUser(user_id=user_id, name=name, discriminator=discriminator, bot=bot)
    except ValueError as exc:
        raise ValueError(f"{where}.id: {exc}") from exc


def user_warnings_from_dict(data: Any, where: str = "users[0]") -> UserWarnings:
    user = warned_user_from_dict(_require(data, "user", dict, where), f"{where}.user")

    warning_count = _require(data, "warningCount", int, where)
    if warning_count < 0:
        raise ValueError(f"{where}.warningCount: must be non-negative, got {warning_count}")

    warnings: List[WarningEntry] = []
    for index, raw in enumerate(_require_list(data, "warnings", where)):
        warnings.append(WarningEntry(_require(raw, "reason", str, f"{where}.warnings[{index}]")))

    return UserWarnings(user=user, warning_count=warning_count, warnings=warnings)


def guild_warnings_from_dict(data: Any, where: str = "guilds[0]") -> GuildWarnings:
    guild_id = _require(data, "id", (str, int), where)
    users = [
        user_warnings_from_dict(raw, f"{where}.users[{index}]")
        for index, raw in enumerate(_require_list(data, "users", where))
    ]
    try:
        return GuildWarnings(guild_id=guild_id, users=users)
    except ValueError as exc:
        raise ValueError(f"{where}.id: {exc}") from exc


def guilds_from_dict(data: Any) -> List[GuildWarnings]:
    """Decode the top-level mapping into the ordered list of guilds."""
    return [
        guild_warnings_from_dict(raw, f"guilds[{index}]")
        for index, raw in enumerate(_require_list(data, "guilds", "store"))
    ]
