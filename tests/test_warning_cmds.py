import pytest
from pathlib import Path
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

from modwarn.bot.cogs import warning_cmds
from modwarn.storage.warning_manager import WarningManager


def make_ctx(guild_id=555) -> Any:
    return SimpleNamespace(guild_id=guild_id, defer=AsyncMock(), send_followup=AsyncMock())


@pytest.fixture()
def manager(warnings_path: Path) -> WarningManager:
    return WarningManager(warnings_path)


@pytest.fixture()
def allow_all(monkeypatch):
    monkeypatch.setattr(warning_cmds, "has_permissions", lambda ctx, **_: True)


def test_setup_registers_cog():
    captured = {}

    def fake_add_cog(cog):
        captured["cog"] = cog

    fake_bot = SimpleNamespace(add_cog=fake_add_cog)
    warning_cmds.setup(fake_bot)
    assert isinstance(captured["cog"], warning_cmds.WarningCog)
    assert captured["cog"].manager is warning_cmds.warning_manager


@pytest.mark.asyncio
async def test_warn_records_and_replies_with_summary(manager, allow_all, make_member, warnings_path):
    cog = warning_cmds.WarningCog(SimpleNamespace(), manager=manager)
    ctx = make_ctx()
    member = make_member(42, "Alice")

    await warning_cmds.WarningCog.warn.callback(cog, ctx, member, "spam")
    await warning_cmds.WarningCog.warn.callback(cog, ctx, member, "flood")

    ctx.defer.assert_awaited_with(ephemeral=True)
    ctx.send_followup.assert_awaited_with("User Alice has 2 warning(s):\n1: spam\n2: flood\n")
    assert warnings_path.is_file()
    record = manager.lookup(555, 42)
    assert record is not None and record.warning_count == 2


@pytest.mark.asyncio
async def test_warn_rejects_missing_permission(manager, monkeypatch, make_member):
    monkeypatch.setattr(warning_cmds, "has_permissions", lambda ctx, **_: False)
    cog = warning_cmds.WarningCog(SimpleNamespace(), manager=manager)
    ctx = make_ctx()

    await warning_cmds.WarningCog.warn.callback(cog, ctx, make_member(42, "Alice"), "spam")

    ctx.send_followup.assert_awaited_once_with("You do not have permission to use this command.")
    assert manager.store.guilds == []


@pytest.mark.asyncio
async def test_warn_requires_guild(manager, allow_all, make_member):
    cog = warning_cmds.WarningCog(SimpleNamespace(), manager=manager)
    ctx = make_ctx(guild_id=None)

    await warning_cmds.WarningCog.warn.callback(cog, ctx, make_member(42, "Alice"), "spam")

    ctx.send_followup.assert_awaited_once_with("This command can only be used in a server.")
    assert manager.store.guilds == []


@pytest.mark.asyncio
async def test_warn_refuses_bots(manager, allow_all, make_member):
    cog = warning_cmds.WarningCog(SimpleNamespace(), manager=manager)
    ctx = make_ctx()

    await warning_cmds.WarningCog.warn.callback(cog, ctx, make_member(7, "Helper", bot=True), "spam")

    ctx.send_followup.assert_awaited_once_with("Bots cannot be warned.")
    assert manager.store.guilds == []


@pytest.mark.asyncio
async def test_warn_reports_save_failure(tmp_path, allow_all, make_member):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    manager = WarningManager(blocker / "warnings.json")
    cog = warning_cmds.WarningCog(SimpleNamespace(), manager=manager)
    ctx = make_ctx()

    await warning_cmds.WarningCog.warn.callback(cog, ctx, make_member(42, "Alice"), "spam")

    message = ctx.send_followup.await_args.args[0]
    assert message.startswith("The warning was recorded but could not be saved:")
    assert manager.lookup(555, 42) is not None


@pytest.mark.asyncio
async def test_warnings_for_unwarned_user(manager, allow_all, make_member):
    cog = warning_cmds.WarningCog(SimpleNamespace(), manager=manager)
    ctx = make_ctx()

    await warning_cmds.WarningCog.warnings.callback(cog, ctx, make_member(42, "Alice"))

    ctx.send_followup.assert_awaited_once_with("User Alice has 0 warning(s)")
    assert manager.store.guilds == []


@pytest.mark.asyncio
async def test_warnings_are_scoped_to_guild(manager, allow_all, make_member):
    cog = warning_cmds.WarningCog(SimpleNamespace(), manager=manager)
    member = make_member(42, "Alice")
    manager.warn(1, warning_cmds.WarnedUser.from_member(member), "elsewhere")

    ctx = make_ctx(guild_id=2)
    await warning_cmds.WarningCog.warnings.callback(cog, ctx, member)

    ctx.send_followup.assert_awaited_once_with("User Alice has 0 warning(s)")


@pytest.mark.asyncio
async def test_warnings_long_history_is_split(manager, allow_all, make_member):
    cog = warning_cmds.WarningCog(SimpleNamespace(), manager=manager)
    member = make_member(42, "Alice")
    for _ in range(30):
        manager.store.add_warning(555, warning_cmds.WarnedUser.from_member(member), "x" * 100)

    ctx = make_ctx()
    await warning_cmds.WarningCog.warnings.callback(cog, ctx, member)

    chunks = [call.args[0] for call in ctx.send_followup.await_args_list]
    assert len(chunks) > 1
    assert all(len(chunk) <= 2000 for chunk in chunks)
    assert "".join(chunks) == manager.summary(555, warning_cmds.WarnedUser.from_member(member))
