from unittest.mock import AsyncMock, MagicMock

import nextcord
import pytest
import pytz

from rainbow_utils.config import BotSettings
from rainbow_utils.guild_state import GuildStateRegistry

BOT_USER_ID = 424242


@pytest.fixture
def settings():
    return BotSettings(
        token="test-token",
        update_interval=30.0,
        die_on_boot=False,
        stats_timezone=pytz.utc,
        log_level="INFO",
    )


@pytest.fixture
def bot(settings):
    bot = MagicMock()
    bot.settings = settings
    bot.guild_states = GuildStateRegistry()
    bot.user = MagicMock(id=BOT_USER_ID)
    bot.guilds = []
    bot.change_presence = AsyncMock()
    bot.close = AsyncMock()
    bot.is_closed = MagicMock(return_value=False)
    return bot


def make_text_channel(name, position, can_send=True, channel_id=None):
    channel = MagicMock(spec=nextcord.TextChannel)
    channel.name = name
    channel.position = position
    channel.id = channel_id if channel_id is not None else position + 1000
    channel.permissions_for.return_value = MagicMock(send_messages=can_send)
    channel.send = AsyncMock()
    return channel


def make_guild(guild_id=1, name="Test Guild", text_channels=None, system_channel=None, roles=None,
               manage_roles=True, top_role_position=10):
    guild = MagicMock()
    guild.id = guild_id
    guild.name = name
    guild.text_channels = text_channels or []
    guild.system_channel = system_channel
    guild.roles = roles or []
    guild.members = []
    guild.me.guild_permissions.manage_roles = manage_roles
    guild.me.top_role.position = top_role_position
    for channel in guild.text_channels:
        channel.guild = guild
    if system_channel is not None:
        system_channel.guild = guild
    return guild


def make_role(name, color_value=0, position=1, role_id=None):
    role = MagicMock()
    role.name = name
    role.id = role_id if role_id is not None else hash(name) & 0xFFFFFF
    role.position = position
    role.color = nextcord.Color(color_value)
    role.is_default.return_value = False
    role.is_integration.return_value = False
    role.is_bot_managed.return_value = False
    role.is_premium_subscriber.return_value = False

    async def edit(color=None, reason=None):
        role.color = color

    role.edit = AsyncMock(side_effect=edit)
    return role
