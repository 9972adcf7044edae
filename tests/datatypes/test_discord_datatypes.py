import pytest

from modwarn.datatypes.discord_datatypes import (
    UserID,
    DiscordUsername,
    GuildID,
    coerce_snowflake,
)


class DummyObj:
    def __init__(self, id_val=None, name=None):
        self.id = id_val
        self.name = name


def test_userid_from_int_and_str_and_equality_and_hash():
    u1 = UserID(12345)
    assert int(u1) == 12345
    assert str(u1) == "12345"

    u2 = UserID("12345")
    assert u1 == u2

    u3 = UserID.from_int(67890)
    assert isinstance(u3, UserID)
    assert u3.to_int() == 67890

    u4 = UserID.from_user(DummyObj(id_val=111))  # type: ignore
    assert int(u4) == 111

    # equality with raw types
    assert u4 == 111
    assert u4 == "111"

    # hashing and set membership
    s = {u1, u2, u3, u4}
    assert len(s) == 3


@pytest.mark.parametrize("bad", [[], {"not": "valid"}, "abc", -5, "-5", True])
def test_snowflake_invalid_input_raise(bad):
    with pytest.raises(ValueError):
        UserID(bad)  # type: ignore


def test_guild_and_user_ids_never_compare_equal():
    assert GuildID(5) != UserID(5)
    assert GuildID.from_guild(DummyObj(id_val=5)) == GuildID("5")  # type: ignore


def test_repr_names_the_wrapper():
    assert repr(GuildID(7)) == "GuildID('7')"
    assert repr(UserID(7)) == "UserID('7')"


def test_discordusername_behavior_and_defaults():
    d1 = DiscordUsername("Alice")
    assert str(d1) == "Alice"
    assert d1 == "Alice"

    d2 = DiscordUsername(DiscordUsername("Bob"))
    assert str(d2) == "Bob"

    assert str(DiscordUsername("")) == DiscordUsername.DEFAULT_USERNAME
    assert str(DiscordUsername(None)) == DiscordUsername.DEFAULT_USERNAME
    assert DiscordUsername.unknown() == DiscordUsername.DEFAULT_USERNAME

    from_user = DiscordUsername.from_user(DummyObj(id_val=1, name="SomeUser"))  # type: ignore
    assert str(from_user) == "SomeUser"


@pytest.mark.parametrize("value", [42, "42", GuildID(42)])
def test_coerce_snowflake_wraps_numeric_ids(value):
    key = coerce_snowflake(value, GuildID)
    assert isinstance(key, GuildID)
    assert key == GuildID(42)


def test_coerce_snowflake_keeps_opaque_tokens_verbatim():
    assert coerce_snowflake("guild1", GuildID) == "guild1"
    assert coerce_snowflake(" u1 ", UserID) == " u1 "
    assert coerce_snowflake(" 42 ", GuildID) == " 42 "


@pytest.mark.parametrize("token", ["²", "١٢", "４２"])
def test_coerce_snowflake_treats_non_ascii_digits_as_tokens(token):
    key = coerce_snowflake(token, GuildID)
    assert key == token
    assert not isinstance(key, GuildID)


def test_coerce_snowflake_keeps_negative_ints_as_tokens():
    assert coerce_snowflake(-5, GuildID) == "-5"
    assert coerce_snowflake("-5", GuildID) == "-5"


def test_coerce_snowflake_rejects_empty_token_and_bool():
    with pytest.raises(ValueError):
        coerce_snowflake("", UserID)
    with pytest.raises(ValueError):
        coerce_snowflake(True, UserID)


def test_snowflake_does_not_match_padded_strings():
    assert GuildID(42) != " 42 "
