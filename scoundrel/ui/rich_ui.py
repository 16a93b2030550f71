from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..actions import GameOutcome
from ..actions import Lose
from ..errors import InputError
from ..errors import UiError
from ..models import Card
from ..models import CardKind
from ..models import GameInfo
from ..rules import MAX_HEALTH
from .base import BaseUI
from .base import outcome_line
from .commands import HELP
from .rules_text import RULES

# ---------- styling helpers ----------

_KIND_STYLE = {
    CardKind.MONSTER: "bold white",
    CardKind.WEAPON: "bold cyan",
    CardKind.POTION: "bold red",
}

_KIND_ICON = {
    CardKind.MONSTER: "👹",
    CardKind.WEAPON: "🗡",
    CardKind.POTION: "🧪",
}


def card_markup(card: Card) -> str:
    style = _KIND_STYLE[card.kind]
    return f"[{style}]{card.label}[/{style}]"


def health_markup(health: int) -> str:
    if health > MAX_HEALTH // 2:
        color = "green"
    elif health > MAX_HEALTH // 4:
        color = "yellow"
    else:
        color = "red"
    return f"[{color}]{health}[/{color}]/{MAX_HEALTH}"


def weapon_markup(info: GameInfo) -> str:
    if info.weapon_strength == 0:
        return "bare hands"
    if info.last_slain == 0:
        return f"{info.weapon_strength} (unused)"
    return f"{info.weapon_strength} (kills below {info.last_slain})"


def room_table(info: GameInfo) -> Table:
    t = Table(title=f"Room (turn {info.turn})")
    t.add_column("#", justify="right", style="cyan")
    t.add_column("Card")
    t.add_column("Kind")
    t.add_column("Strength", justify="right")
    if not info.room_cards:
        t.add_row("-", "(empty)", "-", "-")
    for i, card in enumerate(info.room_cards, start=1):
        t.add_row(str(i), card_markup(card), f"{_KIND_ICON[card.kind]} {card.kind}", str(card.strength))
    return t


def status_line(info: GameInfo) -> str:
    skipped = info.last_skipped if info.last_skipped else "never"
    return (
        f"Health {health_markup(info.health)} | Weapon {weapon_markup(info)} | "
        f"Deck {info.remaining_cards} | Last skip: {skipped}"
    )


# ---------- Rich UI ----------


class RichUI(BaseUI):
    def __init__(self, console: Optional[Console] = None, clear: bool = True) -> None:
        self.console = console or Console()
        self.clear = clear

    def render(self, info: GameInfo) -> None:
        c = self.console
        if self.clear:
            c.clear()
        c.print(room_table(info))
        c.print(status_line(info))
        c.print(f"[dim]{HELP}[/dim]")

    def read_line(self, prompt: str = "> ") -> str:
        try:
            return self.console.input(prompt)
        except (EOFError, KeyboardInterrupt, OSError) as e:
            raise InputError(UiError.INPUT_READ_FAILED, type(e).__name__) from e

    def show_message(self, msg: str) -> None:
        self.console.print(Text(msg))

    def show_error(self, msg: str) -> None:
        # msg can echo what the player typed; never parse it as markup
        self.console.print(Text(msg, style="bold red"))

    def show_rules(self) -> None:
        self.console.print(Panel(RULES, title="Rules", border_style="magenta"))

    def show_outcome(self, outcome: GameOutcome) -> None:
        style = "bold red" if isinstance(outcome, Lose) else "bold green"
        self.console.print(Text(outcome_line(outcome), style=style))
