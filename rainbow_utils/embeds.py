import nextcord
from nextcord import Embed, Color

from rainbow_utils.colors import COLORS, SCHEMES, color_title, describe_color

BOT_NAME = "Rainbow Roles"
FOOTER_TEXT = "Rainbow Roles • mention me with \"help\" for commands"
EMBED_COLOR = Color.blurple()

# (command, description) in the order the help page lists them
COMMAND_DESCRIPTIONS = (
    ("help", "Show this help page and all available commands."),
    ("guide", "Print out the Rainbow Roles setup/usage guide."),
    ("colors", "List possible color names for use in defining new roles."),
    ("sets", "List all pre-programmed color sets for easy definition of new roles."),
    ("pause", "Pause or resume the color rotation of roles on this server."),
)


def _embed(title: str, description: str, color: nextcord.Color = EMBED_COLOR) -> Embed:
    embed = Embed(title=title, description=description, color=color)
    embed.set_footer(text=FOOTER_TEXT)
    return embed


def welcome_embed() -> Embed:
    return _embed(
        BOT_NAME,
        f"Thanks for adding {BOT_NAME} to your Discord server!\n"
        f"Use \"@{BOT_NAME} help\" to get help using rainbow roles."
    )


def help_embed() -> Embed:
    embed = _embed(
        f"{BOT_NAME} Help",
        f"Using the {BOT_NAME} Discord bot is very easy.\n"
        f"Run commands by mentioning the bot with the command you want to run. (e.x. \"@{BOT_NAME} help\")"
    )
    for command, description in COMMAND_DESCRIPTIONS:
        embed.add_field(name=command, value=description, inline=False)
    return embed


def guide_embed() -> Embed:
    return _embed(
        "Usage Guide",
        "Creating a rainbow role is simple.\n"
        "Add a new role **below the bot's highest role** in the roles list.\n"
        "Then, name it `rainbow-red` or another color combo like `rainbow-bluegreen`.\n"
        "Dashes are allowed too so try `rainbow-red-purple-bluegreen-white`.\n"
        "The bot will automatically start cycling colors for that role.\n"
        "You can also use some special sets like `rainbow-pride` or `rainbow-orangetored`."
    )


def colors_embed() -> Embed:
    embed = _embed("Color List", "Here are all the available colors and their color codes.")
    for name, rgb in COLORS.items():
        embed.add_field(name=f"{color_title(name)} (`{name}`)", value=describe_color(rgb), inline=True)
    return embed


def sets_embed() -> Embed:
    embed = _embed(
        "Color Set List",
        f"These are all the {BOT_NAME} pre-programmed color sets.\n"
        "Use them instead of colors and they will be replaced with the colors they contain."
    )
    for scheme in SCHEMES.values():
        value = "\n".join(describe_color(rgb) for rgb in scheme.colors)
        embed.add_field(name=f"{scheme.name} ({scheme.key})", value=value, inline=True)
    return embed


def permission_required_embed() -> Embed:
    return _embed(
        "Permission Required",
        "Sorry but you need the \"Manage Roles\" permission to start/stop the cycling of role colors.",
        color=Color.red()
    )


def cycling_toggled_embed(paused: bool) -> Embed:
    return _embed(
        f"Role Cycling {'Stopped' if paused else 'Started'}",
        f"Role color cycling has now been {'paused' if paused else 'resumed'} on this server.\n"
        "Use \"pause\" to enable/disable role color cycling."
    )


def command_not_found_embed(content: str) -> Embed:
    return _embed(
        "Command Not Found",
        f"Sorry but \"{content[:1500]}\" isn't a valid command.\n"
        "Use \"help\" to view possible commands.",
        color=Color.orange()
    )
