import nextcord
from nextcord.ext import commands
import sys
import logging

from rainbow_utils.config import BotSettings, ConfigError, load_settings
from rainbow_utils.guild_state import GuildStateRegistry

# --- Logging Setup ---
logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(levelname)s - %(name)s - [%(module)s.%(funcName)s:%(lineno)d] %(message)s',
                    datefmt='%Y-%m-%d %H:%M:%S')

# --- Cog Loading ---
INITIAL_EXTENSIONS = [
    'cogs.lifecycle_cog',
    'cogs.rainbow_role_cog',
    'cogs.command_responder_cog',
]


def build_intents() -> nextcord.Intents:
    intents = nextcord.Intents.default()
    intents.guilds = True
    intents.messages = True
    intents.message_content = True
    intents.members = True
    intents.invites = True
    return intents


# Custom Bot class that owns the per-guild runtime state
class RainbowBot(commands.Bot):
    def __init__(self, settings: BotSettings, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.settings = settings
        self.guild_states = GuildStateRegistry()
        self.exit_code = 0

    async def on_message(self, message: nextcord.Message):
        # Mention commands are handled by CommandResponderCog; no prefix commands exist.
        return

    async def on_error(self, event_method: str, *args, **kwargs):
        logging.error(f"Unhandled error in event handler '{event_method}'.", exc_info=True)


def create_bot(settings: BotSettings) -> RainbowBot:
    # Prefix is required by commands.Bot but unused: on_message never processes prefix commands.
    bot = RainbowBot(settings, command_prefix="!", intents=build_intents(), help_command=None)
    for extension in INITIAL_EXTENSIONS:
        try:
            bot.load_extension(extension)
            logging.info(f'Successfully loaded extension: {extension}')
        except Exception:
            logging.error(f'Failed to load extension {extension}.', exc_info=True)
            raise
    return bot


def main() -> int:
    try:
        settings = load_settings()
    except ConfigError as e:
        logging.error(f"FATAL: {e} Exiting.")
        return 1

    logging.getLogger().setLevel(settings.log_level)
    logging.info(f"Nextcord Version: {nextcord.__version__}")

    bot = create_bot(settings)
    # A disconnect is fatal: the lifecycle cog closes the bot and sets exit_code.
    bot.run(settings.token, reconnect=False)
    return bot.exit_code


if __name__ == '__main__':
    sys.exit(main())
