"""
Pytest configuration and fixtures for modwarn tests.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add src directory to path so imports work
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture()
def warnings_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "warnings.json"


@pytest.fixture()
def make_member():
    """Build a stand-in for a discord.Member with the attributes the store reads."""

    def _make(member_id: int, name: str, discriminator: str = "0", bot: bool = False):
        return SimpleNamespace(id=member_id, name=name, discriminator=discriminator, bot=bot)

    return _make
