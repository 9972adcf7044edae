"""
Stateless Discord helpers used by the command layer.
"""

from typing import List

import discord

# Discord rejects messages longer than this
MESSAGE_LIMIT = 2000


def has_permissions(application_context: discord.ApplicationContext, **required_permissions) -> bool:
    """
    Check if the command issuer has all specified permissions in the guild.

    Args:
        application_context (discord.ApplicationContext): The command context.
        **required_permissions: Permission flags to check.

    Returns:
        bool: True if all permissions are present, False otherwise.
    """
    if not isinstance(application_context.author, discord.Member):
        return False
    return all(getattr(application_context.author.guild_permissions, permission_name, False) for permission_name in required_permissions)


def split_message(text: str, limit: int = MESSAGE_LIMIT) -> List[str]:
    """Split ``text`` into chunks no longer than ``limit``.

    Breaks happen on line boundaries where possible; a single line longer
    than ``limit`` is hard-wrapped.
    """
    chunks: List[str] = []
    current = ""
    for line in text.splitlines(keepends=True):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        if len(current) + len(line) > limit:
            chunks.append(current)
            current = ""
        current += line
    if current or not chunks:
        chunks.append(current)
    return chunks
