from __future__ import annotations

from typing import Callable
from typing import Optional

from ..errors import InputError
from ..errors import UiError
from ..models import Card
from ..models import CardKind
from ..models import GameInfo
from .base import BaseUI
from .commands import HELP
from .rules_text import RULES

WHITE = "\033[37m"
CYAN = "\033[36m"
GREY = "\033[90m"
RED = "\033[31m"
YELLOW = "\033[33m"
RST = "\033[0m"

CLEAR = "\033[2J\033[H"

_KIND_COLOR = {
    CardKind.MONSTER: WHITE,
    CardKind.WEAPON: CYAN,
    CardKind.POTION: RED,
}


def card_str(c: Card) -> str:
    return f"{_KIND_COLOR[c.kind]}{c.label}{RST}"


class TerminalUI(BaseUI):
    """Plain ANSI renderer for terminals without rich."""

    def __init__(self, out: Optional[Callable[[str], None]] = None, reader: Optional[Callable[[str], str]] = None, clear: bool = True) -> None:
        self.out = out or print
        self.reader = reader or input
        self.clear = clear

    def render(self, info: GameInfo):
        if self.clear:
            self.out(CLEAR)
        cards = " ".join(f"[{i}] {card_str(c)}" for i, c in enumerate(info.room_cards, start=1))
        self.out(cards or "(empty room)")
        self.out(f"health: {info.health}")
        self.out(f"weapon: {info.weapon_strength} | can fight below: {info.last_slain or '-'}")
        self.out(f"cards in deck: {info.remaining_cards}")
        self.out(f"turn: {info.turn} | last skipped: {info.last_skipped or '-'}")
        self.out(f"{GREY}{HELP}{RST}")

    def read_line(self, prompt: str = "> ") -> str:
        try:
            return self.reader(prompt)
        except (EOFError, KeyboardInterrupt, OSError) as e:
            raise InputError(UiError.INPUT_READ_FAILED, type(e).__name__) from e

    def show_message(self, msg: str) -> None:
        self.out(msg)

    def show_error(self, msg: str) -> None:
        self.out(f"{YELLOW}{msg}{RST}")

    def show_rules(self) -> None:
        self.out(RULES)
