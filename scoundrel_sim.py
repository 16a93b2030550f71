"""Top-level import surface for the Scoundrel game; `python scoundrel_sim.py` starts a session."""

from scoundrel import Card
from scoundrel import CardKind
from scoundrel import Deck
from scoundrel import Game
from scoundrel import GameError
from scoundrel import GameEvent
from scoundrel import Lose
from scoundrel import Player
from scoundrel import Rank
from scoundrel import Room
from scoundrel import Suit
from scoundrel import Win
from scoundrel.main import main
from scoundrel.ui import parse_action
from scoundrel.ui import select_ui

__all__ = [
    "Card",
    "CardKind",
    "Deck",
    "Game",
    "GameError",
    "GameEvent",
    "Lose",
    "Player",
    "Rank",
    "Room",
    "Suit",
    "Win",
    "parse_action",
    "select_ui",
    "main",
]


if __name__ == "__main__":
    raise SystemExit(main())
