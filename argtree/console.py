# Argtree CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for argtree output."""
from rich.console import Console
from rich.theme import Theme

ARGTREE_THEME = Theme(
    {
        "argtree.usage": "bold cyan",
        "argtree.error": "bold red",
        "argtree.command": "bold blue",
        "argtree.option": "green",
        "argtree.positional": "yellow",
        "argtree.muted": "dim white",
    }
)

console = Console(theme=ARGTREE_THEME)
err_console = Console(theme=ARGTREE_THEME, stderr=True)
