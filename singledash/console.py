# Singledash CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Singledash output."""
from rich.console import Console

from singledash.themes import get_one_theme

console = Console(color_system="truecolor", theme=get_one_theme())
