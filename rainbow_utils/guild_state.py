import logging
from typing import Dict, Optional

logger = logging.getLogger('nextcord.guild_state')


class GuildState:
    """Runtime state the bot keeps for one guild.

    Lives only as long as the process; nothing here is persisted.
    """

    def __init__(self, guild_id: int):
        self.guild_id = guild_id
        self.paused = False
        # role id -> index of the next color to push
        self.role_positions: Dict[int, int] = {}

    def toggle_paused(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def forget_role(self, role_id: int):
        self.role_positions.pop(role_id, None)

    def __repr__(self) -> str:
        return f"<GuildState guild_id={self.guild_id} paused={self.paused} roles={len(self.role_positions)}>"


class GuildStateRegistry:
    def __init__(self):
        self._states: Dict[int, GuildState] = {}

    def get(self, guild_id: int) -> GuildState:
        state = self._states.get(guild_id)
        if state is None:
            state = GuildState(guild_id)
            self._states[guild_id] = state
        return state

    def peek(self, guild_id: int) -> Optional[GuildState]:
        return self._states.get(guild_id)

    def is_paused(self, guild_id: int) -> bool:
        state = self._states.get(guild_id)
        return state.paused if state else False

    def toggle_paused(self, guild_id: int) -> bool:
        paused = self.get(guild_id).toggle_paused()
        logger.info(f"Guild {guild_id} role cycling is now {'paused' if paused else 'active'}.")
        return paused

    def discard(self, guild_id: int):
        self._states.pop(guild_id, None)

    def __len__(self) -> int:
        return len(self._states)
