import nextcord
from nextcord.ext import commands
from nextcord import Guild, ActivityType
import logging
import asyncio
import pytz
from typing import List, Optional

from rainbow_utils import embeds
from rainbow_utils.channels import main_channel

logger = logging.getLogger('nextcord.lifecycle_cog')
stats_logger = logging.getLogger('nextcord.lifecycle_cog.stats')
invite_logger = logging.getLogger('nextcord.lifecycle_cog.invites')
death_logger = logging.getLogger('nextcord.lifecycle_cog.die')

PRESENCE_NAME = "Rainbow Roles"
DIE_ON_BOOT_DELAY = 8    # seconds after ready before leaving guilds
LEAVE_GUILD_DELAY = 5    # seconds before each guild is left


class LifecycleCog(commands.Cog, name="Lifecycle"):
    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self._startup_done = False
        self._die_task: Optional[asyncio.Task] = None

    @property
    def settings(self):
        return self.bot.settings

    @commands.Cog.listener()
    async def on_ready(self):
        logger.info(f"Logged in as {self.bot.user} (ID: {self.bot.user.id}), in {len(self.bot.guilds)} guild(s).")
        await self.bot.change_presence(
            status=nextcord.Status.online,
            activity=nextcord.Activity(type=ActivityType.watching, name=PRESENCE_NAME)
        )
        if self._startup_done:
            return
        self._startup_done = True

        if self.settings.die_on_boot:
            self._die_task = asyncio.create_task(self.leave_all_guilds())
            self._die_task.add_done_callback(self._report_die_task)

        stats_logger.info(self.build_stats_report(list(self.bot.guilds)))
        await asyncio.gather(*(self.audit_invites(guild) for guild in self.bot.guilds))

    @commands.Cog.listener()
    async def on_disconnect(self):
        logger.critical("Bot disconnected from Discord. Shutting down.")
        self.bot.exit_code = 1
        if not self.bot.is_closed():
            await self.bot.close()

    @commands.Cog.listener()
    async def on_http_ratelimit(self, limit, remaining, reset_after, bucket, scope):
        logger.warning(f"Bot hit rate limit on bucket {bucket} ({scope}): {remaining}/{limit}, resets after {reset_after}s")

    @commands.Cog.listener()
    async def on_global_http_ratelimit(self, retry_after):
        logger.warning(f"Bot hit the global rate limit, retrying after {retry_after}s")

    @commands.Cog.listener()
    async def on_guild_join(self, guild: Guild):
        logger.info(f"Bot joined guild {guild.id} ({guild.name})")
        channel = main_channel(guild)
        if channel is None:
            logger.warning(f"No channel in guild {guild.id} ({guild.name}) accepts messages, skipping welcome message.")
            return
        try:
            await channel.send(embed=embeds.welcome_embed())
        except nextcord.HTTPException as e:
            logger.error(f"Failed to send welcome message to channel {channel.id} in guild {guild.id}: {e}")

    # --- Startup statistics ---
    def _format_time(self, when) -> str:
        if when is None:
            return "unknown"
        if when.tzinfo is None:
            when = pytz.utc.localize(when)
        return when.astimezone(self.settings.stats_timezone).strftime('%Y-%m-%d %H:%M:%S %Z')

    def _member_line(self, member: nextcord.Member) -> str:
        is_admin = member.guild_permissions.administrator
        nickname = f" ({member.nick})" if member.nick else ""
        return f"    {'admin' if is_admin else 'user '} {member}{nickname} with role {member.top_role.name}\n"

    def build_stats_report(self, guilds: List[Guild]) -> str:
        report = "connected to discord, currently participating in the following guilds:\n"
        for guild in guilds:
            joined_at = guild.me.joined_at if guild.me else None
            report += f"({guild.id}) {guild.name} joined at {self._format_time(joined_at)}\n"
            admins = ""
            users = ""
            for member in guild.members:
                line = self._member_line(member)
                if member.guild_permissions.administrator:
                    admins += line
                else:
                    users += line
            report += admins
            report += users
        return report

    async def audit_invites(self, guild: Guild):
        try:
            invites = await guild.invites()
        except nextcord.HTTPException as e:
            stats_logger.warning(f"Error fetching invites for guild ({guild.id}) {guild.name}: {e}")
            return
        except Exception as e:
            stats_logger.error(f"Error fetching invites for guild ({guild.id}) {guild.name}: {e}", exc_info=True)
            return
        for invite in invites:
            invite_logger.info(f"({guild.id}) {guild.name} has invite {invite.url} with {invite.max_uses} max uses")

    # --- Die on boot ---
    async def leave_guild(self, guild: Guild):
        await asyncio.sleep(LEAVE_GUILD_DELAY)
        await guild.leave()

    async def _leave_guild_logged(self, guild: Guild):
        death_logger.info(f"Now leaving guild ({guild.id}) {guild.name}")
        try:
            await self.leave_guild(guild)
        except nextcord.HTTPException as e:
            death_logger.error(f"Failed to leave guild ({guild.id}) {guild.name}: {e}")
            return
        except Exception as e:
            death_logger.error(f"Unexpected error leaving guild ({guild.id}) {guild.name}: {e}", exc_info=True)
            return
        death_logger.info(f"Left guild ({guild.id}) {guild.name}")

    def _report_die_task(self, task: asyncio.Task):
        if task.cancelled():
            death_logger.warning("Die on boot was cancelled before all guilds were left.")
            return
        error = task.exception()
        if error is not None:
            death_logger.error("Die on boot failed.", exc_info=error)

    async def leave_all_guilds(self, delay: float = DIE_ON_BOOT_DELAY):
        await asyncio.sleep(delay)
        death_logger.warning("Die on boot has been enabled, leaving all guilds.")
        await asyncio.gather(*(self._leave_guild_logged(guild) for guild in list(self.bot.guilds)))


def setup(bot: commands.Bot):
    bot.add_cog(LifecycleCog(bot))
