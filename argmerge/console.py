# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for the Argmerge command-line front end."""
from rich.console import Console
from rich.theme import Theme

ARGMERGE_THEME = Theme(
    {
        "argmerge.error": "bold #BF616A",
        "argmerge.hint": "italic #A3BE8C",
        "argmerge.token": "bold #EBCB8B",
    }
)

console = Console(theme=ARGMERGE_THEME)
error_console = Console(theme=ARGMERGE_THEME, stderr=True)
