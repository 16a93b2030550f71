from __future__ import annotations

from .base import BaseUI
from .commands import parse_action


def select_ui(name: str) -> BaseUI:
    """Lazy import so the engine never pulls in rich."""
    if name and name.lower() == "rich":
        from .rich_ui import RichUI

        return RichUI()
    if name and name.lower() in ("term", "terminal"):
        from .terminal import TerminalUI

        return TerminalUI()
    raise ValueError(f"Unknown UI '{name}'. Use 'rich' or 'term'.")


__all__ = ["BaseUI", "parse_action", "select_ui"]
