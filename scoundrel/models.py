from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Tuple


# Enums / simple types
class Suit(Enum):
    SPADES = "♠"
    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.name.capitalize()


class Rank(Enum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def short(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return self.name[0]

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return self.name.capitalize()


NUMBER_RANKS: Tuple[Rank, ...] = tuple(r for r in Rank if r.value <= 10)
FACE_RANKS: Tuple[Rank, ...] = (Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE)


class CardKind(Enum):
    MONSTER = "monster"
    WEAPON = "weapon"
    POTION = "potion"

    def __str__(self) -> str:
        return self.value


_KIND_BY_SUIT = {
    Suit.SPADES: CardKind.MONSTER,
    Suit.CLUBS: CardKind.MONSTER,
    Suit.DIAMONDS: CardKind.WEAPON,
    Suit.HEARTS: CardKind.POTION,
}


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank

    # derived, never passed in
    strength: int = field(init=False)
    kind: CardKind = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "strength", self.rank.value)
        object.__setattr__(self, "kind", _KIND_BY_SUIT[self.suit])

    @property
    def label(self) -> str:
        """Short form used on the board, e.g. ``10♠`` or ``A♣``."""
        return f"{self.rank.short}{self.suit.symbol}"

    @property
    def name(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __str__(self) -> str:
        return self.label


@dataclass
class Weapon:
    strength: int = 0  # 0 = bare hands
    last_slain_monster_strength: int = 0  # 0 = no kill yet

    @property
    def equipped(self) -> bool:
        return self.strength != 0


@dataclass(frozen=True)
class GameInfo:
    """Read-only board snapshot handed to renderers."""

    health: int
    remaining_cards: int
    weapon_strength: int
    last_slain: int
    turn: int
    last_skipped: int
    room_cards: Tuple[Card, ...] = ()
