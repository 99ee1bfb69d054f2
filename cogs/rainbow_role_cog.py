# cogs/rainbow_role_cog.py

import nextcord
from nextcord.ext import commands, tasks
from nextcord import Color, Role, Guild
import logging
import asyncio
from typing import List, Optional, Tuple

from rainbow_utils.colors import RGB, int_to_rgb, rgb_to_int
from rainbow_utils.config import DEFAULT_UPDATE_INTERVAL
from rainbow_utils.guild_state import GuildState, GuildStateRegistry
from rainbow_utils import role_names

# --- Logging Setup ---
logger = logging.getLogger('nextcord.rainbow_role_cog')

UPDATE_REASON = "Rainbow Role Effect"


# --- Cog Class ---
class RainbowRoleCog(commands.Cog, name="RainbowRole"):
    def __init__(self, bot: commands.Bot):
        self.bot = bot
        interval = bot.settings.update_interval
        self.rainbow_update_loop.change_interval(seconds=interval)
        logger.info(f"RainbowRoleCog initialized with a {interval}s update interval.")

    @property
    def guild_states(self) -> GuildStateRegistry:
        return self.bot.guild_states

    def cog_unload(self):
        self.rainbow_update_loop.cancel()
        logger.info("RainbowRoleCog unloaded and task cancelled.")

    @commands.Cog.listener()
    async def on_ready(self):
        # on_ready fires again after a resume, the loop must only be started once
        if not self.rainbow_update_loop.is_running():
            self.rainbow_update_loop.start()
            logger.info("RainbowRoleCog update loop started.")

    @commands.Cog.listener()
    async def on_guild_remove(self, guild: Guild):
        self.guild_states.discard(guild.id)
        logger.info(f"Dropped rainbow state for guild {guild.id} ({guild.name}).")

    def _is_manageable(self, guild: Guild, role: Role) -> bool:
        if role.is_default() or role.is_integration() or role.is_bot_managed() or role.is_premium_subscriber():
            return False
        return role.position < guild.me.top_role.position

    def _rainbow_roles(self, guild: Guild) -> List[Tuple[Role, List[RGB]]]:
        found = []
        for role in guild.roles:
            sequence = role_names.parse_role_name(role.name)
            if sequence is None:
                continue
            if not self._is_manageable(guild, role):
                logger.debug(f"Cannot manage rainbow role '{role.name}' (ID: {role.id}) in guild {guild.id}, skipping.")
                continue
            found.append((role, sequence))
        return found

    def _next_color(self, state: GuildState, role: Role, sequence: List[RGB]) -> RGB:
        index = state.role_positions.get(role.id)
        if index is None:
            index = role_names.starting_index(sequence, int_to_rgb(role.color.value))
        color, state.role_positions[role.id] = role_names.advance(sequence, index)
        return color

    async def update_guild(self, guild: Guild) -> int:
        """Pushes the next color to every rainbow role in ``guild``.

        Returns how many roles were edited.
        """
        if not guild.me.guild_permissions.manage_roles:
            logger.warning(f"Bot lacks 'Manage Roles' permission in guild {guild.id}. Rainbow effect skipped.")
            return 0

        state = self.guild_states.get(guild.id)
        roles = self._rainbow_roles(guild)
        live_ids = {role.id for role, _ in roles}
        for stale_id in [role_id for role_id in state.role_positions if role_id not in live_ids]:
            state.forget_role(stale_id)

        edited = 0
        for role, sequence in roles:
            new_color = self._next_color(state, role, sequence)
            if role.color.value == rgb_to_int(new_color):
                continue
            try:
                await role.edit(color=Color(rgb_to_int(new_color)), reason=UPDATE_REASON)
                edited += 1
                logger.debug(f"Successfully updated role {role.id} to color {rgb_to_int(new_color):06X}")
            except nextcord.Forbidden:
                logger.error(f"Forbidden to edit role {role.id} in guild {guild.id}. Check permissions and hierarchy.")
            except nextcord.HTTPException as e:
                logger.error(f"HTTPException while editing role {role.id} in guild {guild.id}: {e}")
        return edited

    async def _update_guild_logged(self, guild: Guild) -> Optional[int]:
        logger.debug(f"Updating guild {guild.id} ({guild.name})")
        try:
            edited = await self.update_guild(guild)
        except Exception as e:
            logger.error(f"Failed to update guild {guild.id} ({guild.name}): {e}", exc_info=True)
            return None
        logger.debug(f"Completed guild update {guild.id} ({guild.name}), {edited} role(s) edited")
        return edited

    async def update_all_guilds(self):
        targets = [guild for guild in self.bot.guilds if not self.guild_states.is_paused(guild.id)]
        if not targets:
            return
        await asyncio.gather(*(self._update_guild_logged(guild) for guild in targets))

    @tasks.loop(seconds=DEFAULT_UPDATE_INTERVAL)
    async def rainbow_update_loop(self):
        await self.update_all_guilds()

    @rainbow_update_loop.before_loop
    async def before_rainbow_update_loop(self):
        await self.bot.wait_until_ready()
        logger.info("RainbowRoleCog: Update loop is ready to start.")


def setup(bot: commands.Bot):
    bot.add_cog(RainbowRoleCog(bot))
    logger.info("RainbowRoleCog has been loaded.")
