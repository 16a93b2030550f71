from __future__ import annotations

from typing import Iterator
from typing import List
from typing import Tuple

from .deck import Deck
from .errors import GameError
from .errors import GameRuleError
from .models import Card
from .rules import ROOM_CAPACITY


class Room:
    """The face-up cards of the current turn, in deal order."""

    def __init__(self, capacity: int = ROOM_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"room capacity must be >= 1 (got {capacity})")
        self.capacity = capacity
        self._cards: List[Card] = []

    def is_full(self) -> bool:
        return len(self._cards) == self.capacity

    def add(self, card: Card) -> None:
        if self.is_full():
            raise GameRuleError(GameError.ROOM_FULL)
        self._cards.append(card)

    def _check_index(self, index: int) -> None:
        # no negative wraparound: -1 is not "the last card"
        if index < 0 or index >= len(self._cards):
            raise GameRuleError(GameError.INDEX_OUT_OF_BOUNDS)

    def get(self, index: int) -> Card:
        self._check_index(index)
        return self._cards[index]

    def remove(self, index: int) -> Card:
        """Remove and return a card; later cards shift down by one."""
        self._check_index(index)
        return self._cards.pop(index)

    def clear_into(self, deck: Deck) -> None:
        deck.put_all_on_bottom(self._cards)
        self._cards.clear()

    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))
