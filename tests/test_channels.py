from unittest.mock import MagicMock

from conftest import make_guild, make_text_channel
from rainbow_utils.channels import can_send, main_channel


def test_sendable_system_channel_always_wins():
    system = make_text_channel("announcements", position=9)
    general = make_text_channel("general", position=0)
    guild = make_guild(text_channels=[general, system], system_channel=system)
    assert main_channel(guild) is system


def test_general_beats_other_channels_without_system_channel():
    rules = make_text_channel("rules", position=0)
    general = make_text_channel("General", position=5)
    guild = make_guild(text_channels=[rules, general])
    assert main_channel(guild) is general


def test_unsendable_system_channel_is_skipped():
    system = make_text_channel("welcome", position=0, can_send=False)
    chat = make_text_channel("chat", position=3)
    guild = make_guild(text_channels=[system, chat], system_channel=system)
    assert main_channel(guild) is chat


def test_unsendable_general_falls_through_to_lowest_position():
    general = make_text_channel("general", position=0, can_send=False)
    memes = make_text_channel("memes", position=4)
    art = make_text_channel("art", position=2)
    locked = make_text_channel("locked", position=1, can_send=False)
    guild = make_guild(text_channels=[general, locked, memes, art])
    assert main_channel(guild) is art


def test_no_sendable_channel_returns_none():
    guild = make_guild(text_channels=[
        make_text_channel("general", position=0, can_send=False),
        make_text_channel("memes", position=1, can_send=False),
    ])
    assert main_channel(guild) is None


def test_non_text_channels_cannot_receive():
    assert can_send(None) is False
    assert can_send(MagicMock()) is False


def test_only_the_first_named_channel_is_considered():
    general = make_text_channel("general", position=0, can_send=False)
    rules = make_text_channel("rules", position=1)
    chat = make_text_channel("chat", position=5)
    guild = make_guild(text_channels=[general, rules, chat])
    assert main_channel(guild) is rules
