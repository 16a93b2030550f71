from __future__ import annotations

from .actions import Action
from .actions import Equip
from .actions import Fight
from .actions import GameEvent
from .actions import GameOutcome
from .actions import Heal
from .actions import Kill
from .actions import Lose
from .actions import PrintRules
from .actions import Quit
from .actions import Skip
from .actions import StepResult
from .actions import Win
from .deck import Deck
from .deck import standard_cards
from .engine import Game
from .errors import GameError
from .errors import GameRuleError
from .errors import InputError
from .errors import UiError

# Convenient entrypoint
from .main import main
from .models import Card
from .models import CardKind
from .models import GameInfo
from .models import Rank
from .models import Suit
from .models import Weapon
from .player import Player
from .room import Room

__all__ = [
    "Suit",
    "Rank",
    "CardKind",
    "Card",
    "Weapon",
    "GameInfo",
    "Deck",
    "standard_cards",
    "Room",
    "Player",
    "Game",
    "Action",
    "Quit",
    "Skip",
    "PrintRules",
    "Fight",
    "Kill",
    "Heal",
    "Equip",
    "GameEvent",
    "GameOutcome",
    "Win",
    "Lose",
    "StepResult",
    "GameError",
    "GameRuleError",
    "UiError",
    "InputError",
    "main",
]
