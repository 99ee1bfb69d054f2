import re
from typing import Optional

import nextcord

MAIN_CHANNEL_NAMES = re.compile(r"^(general|main|chat)$", re.IGNORECASE)


def can_send(channel: Optional[nextcord.abc.GuildChannel]) -> bool:
    if not isinstance(channel, nextcord.TextChannel):
        return False
    return channel.permissions_for(channel.guild.me).send_messages


def main_channel(guild: nextcord.Guild) -> Optional[nextcord.TextChannel]:
    """Picks the channel the bot should post unsolicited messages to.

    Tries the system channel, then the first channel called general/main/chat, then the
    highest sendable text channel in the list. Returns None when the bot can't
    send anywhere.
    """
    system_channel = guild.system_channel
    if system_channel is not None and can_send(system_channel):
        return system_channel

    named = next((channel for channel in guild.text_channels if MAIN_CHANNEL_NAMES.match(channel.name)), None)
    if named is not None and can_send(named):
        return named

    sendable = [channel for channel in guild.text_channels if can_send(channel)]
    if not sendable:
        return None
    return min(sendable, key=lambda channel: channel.position)
