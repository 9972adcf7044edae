"""
Warnings cog: slash commands for recording and viewing user warnings.

- /warn user reason: record a warning and show the user's history
- /warnings user: show the user's history

Both commands are guild-only and require the moderator permission set in
``config/app_config.yml`` (``moderate_members`` by default). Responses are
ephemeral so warning histories are not exposed in public channels.
"""

import discord
from discord import Option
from discord.ext import commands

from modwarn.configuration.app_configuration import app_config
from modwarn.datatypes.discord_datatypes import GuildID
from modwarn.datatypes.warning_datatypes import WarnedUser
from modwarn.storage.errors import WarningsStoreError
from modwarn.storage.warning_manager import WarningManager, warning_manager
from modwarn.util.discord_utils import has_permissions, split_message
from modwarn.util.logger import get_logger

logger = get_logger("warning_cog")


class WarningCog(commands.Cog):
    """Cog exposing the warning store to moderators."""

    def __init__(self, discord_bot_instance, manager: WarningManager | None = None):
        self.discord_bot_instance = discord_bot_instance
        self.manager = manager or warning_manager
        logger.info("[WARNING CMDS] Warning cog loaded")

    async def check_warning_permissions(self, ctx: discord.ApplicationContext) -> bool:
        """Run the shared guild and permission checks.

        Returns ``False`` after telling the invoker why when a check fails.
        """
        if not ctx.guild_id:
            await ctx.send_followup("This command can only be used in a server.")
            return False

        if not has_permissions(ctx, **{app_config.moderator_permission: True}):
            await ctx.send_followup("You do not have permission to use this command.")
            return False

        return True

    async def send_summary(self, ctx: discord.ApplicationContext, summary: str) -> None:
        for chunk in split_message(summary):
            await ctx.send_followup(chunk)

    @commands.slash_command(name="warn", description="Warn a user and record the reason.")
    async def warn(
        self,
        ctx: discord.ApplicationContext,
        user: Option(discord.Member, "The user to warn.", required=True),  # type: ignore
        reason: Option(str, "Reason for the warning.", required=True),  # type: ignore
    ) -> None:
        await ctx.defer(ephemeral=True)

        if not await self.check_warning_permissions(ctx):
            return

        if getattr(user, "bot", False):
            await ctx.send_followup("Bots cannot be warned.")
            return

        guild_id = GuildID(ctx.guild_id)
        try:
            user_warnings = self.manager.warn(guild_id, WarnedUser.from_member(user), reason)
        except WarningsStoreError as exc:
            logger.error("[WARNING CMDS] Failed to persist warning in guild %s: %s", guild_id, exc)
            await ctx.send_followup(f"The warning was recorded but could not be saved: {exc}")
            return

        await self.send_summary(ctx, user_warnings.format_summary())

    @commands.slash_command(name="warnings", description="Show a user's warnings in this server.")
    async def warnings(
        self,
        ctx: discord.ApplicationContext,
        user: Option(discord.Member, "The user to look up.", required=True),  # type: ignore
    ) -> None:
        await ctx.defer(ephemeral=True)

        if not await self.check_warning_permissions(ctx):
            return

        summary = self.manager.summary(GuildID(ctx.guild_id), WarnedUser.from_member(user))
        await self.send_summary(ctx, summary)


def setup(discord_bot_instance):
    discord_bot_instance.add_cog(WarningCog(discord_bot_instance))
