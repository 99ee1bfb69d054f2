import nextcord
from nextcord.ext import commands
from nextcord import Embed
import logging
import re
from typing import Awaitable, Callable, Optional, Pattern, Tuple

from rainbow_utils import embeds
from rainbow_utils.guild_state import GuildStateRegistry

logger = logging.getLogger('nextcord.command_responder_cog')

CommandHandler = Callable[["CommandResponderCog", nextcord.Message], Awaitable[Embed]]


class CommandResponderCog(commands.Cog, name="Command Responder"):
    """Answers "@bot <command>" messages.

    Commands are matched against the message text in the order of ``COMMANDS``
    and the first pattern that matches produces the only reply.
    """

    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self._mention_pattern: Optional[Pattern[str]] = None

    @property
    def guild_states(self) -> GuildStateRegistry:
        return self.bot.guild_states

    def mention_pattern(self) -> Pattern[str]:
        if self._mention_pattern is None:
            self._mention_pattern = re.compile(rf"<@!?{self.bot.user.id}>")
        return self._mention_pattern

    def is_command_message(self, message: nextcord.Message) -> bool:
        if message.author.bot:
            return False
        if message.guild is None:
            return False
        if self.bot.user not in message.mentions:
            return False
        # a reply ping adds the bot to mentions without a mention in the text
        return bool(self.mention_pattern().search(message.content))

    # --- Handlers ---
    async def show_help(self, message: nextcord.Message) -> Embed:
        return embeds.help_embed()

    async def show_guide(self, message: nextcord.Message) -> Embed:
        return embeds.guide_embed()

    async def show_colors(self, message: nextcord.Message) -> Embed:
        return embeds.colors_embed()

    async def show_sets(self, message: nextcord.Message) -> Embed:
        return embeds.sets_embed()

    async def toggle_pause(self, message: nextcord.Message) -> Embed:
        if not message.author.guild_permissions.manage_roles:
            logger.info(f"{message.author} tried to toggle role cycling in guild {message.guild.id} without Manage Roles.")
            return embeds.permission_required_embed()
        paused = self.guild_states.toggle_paused(message.guild.id)
        logger.info(f"Role cycling {'paused' if paused else 'resumed'} in guild {message.guild.id} by {message.author}.")
        return embeds.cycling_toggled_embed(paused)

    COMMANDS: Tuple[Tuple[Pattern[str], CommandHandler], ...] = (
        (re.compile(r"help"), show_help),
        (re.compile(r"guide"), show_guide),
        (re.compile(r"colors"), show_colors),
        (re.compile(r"sets"), show_sets),
        (re.compile(r"pause|play"), toggle_pause),
    )

    def resolve(self, content: str) -> Optional[CommandHandler]:
        for pattern, handler in self.COMMANDS:
            if pattern.search(content):
                return handler
        return None

    async def build_reply(self, message: nextcord.Message) -> Embed:
        handler = self.resolve(message.content)
        if handler is None:
            return embeds.command_not_found_embed(message.clean_content)
        try:
            return await handler(self, message)
        except Exception as e:
            logger.error(f"Failed to interpret command \"{message.content}\": {e}", exc_info=True)
            return embeds.command_not_found_embed(message.clean_content)

    @commands.Cog.listener()
    async def on_message(self, message: nextcord.Message):
        if not self.is_command_message(message):
            return

        reply = await self.build_reply(message)
        try:
            await message.channel.send(embed=reply)
        except nextcord.Forbidden:
            logger.warning(f"Missing permissions to reply in channel {message.channel.id} for guild {message.guild.id}")
        except nextcord.HTTPException as e:
            logger.error(f"Error sending command reply in channel {message.channel.id}: {e}", exc_info=True)


def setup(bot: commands.Bot):
    bot.add_cog(CommandResponderCog(bot))
