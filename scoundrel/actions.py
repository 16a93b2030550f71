from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from enum import auto
from typing import Optional
from typing import Union

from .errors import GameError


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Skip:
    pass


@dataclass(frozen=True)
class PrintRules:
    pass


# index is 0-based; the text parser converts from the 1-based positions players see
@dataclass(frozen=True)
class Fight:
    index: int


@dataclass(frozen=True)
class Kill:
    index: int


@dataclass(frozen=True)
class Heal:
    index: int


@dataclass(frozen=True)
class Equip:
    index: int


Action = Union[Quit, Skip, PrintRules, Fight, Kill, Heal, Equip]
CardAction = Union[Fight, Kill, Heal, Equip]


class GameEvent(Enum):
    QUIT_GAME = auto()
    TURN_ENDED = auto()
    ACTION_APPLIED = auto()
    RULES_PRINTED = auto()


@dataclass(frozen=True)
class Win:
    score: int


@dataclass(frozen=True)
class Lose:
    score: int  # positive; renderers show it negated


GameOutcome = Union[Win, Lose]


@dataclass(frozen=True)
class StepResult:
    event: Optional[GameEvent] = None
    error: Optional[GameError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
