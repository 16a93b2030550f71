from __future__ import annotations

import random
from typing import Iterable
from typing import Iterator
from typing import List
from typing import Optional

from .logging_utils import get_logger
from .models import FACE_RANKS
from .models import NUMBER_RANKS
from .models import Card
from .models import CardKind
from .models import Suit

log = get_logger(__name__)


def standard_cards() -> List[Card]:
    """The fixed 44-card population: black suits 2..A, red suits 2..10 only."""
    cards: List[Card] = []
    for suit in (Suit.SPADES, Suit.CLUBS):
        for rank in NUMBER_RANKS + FACE_RANKS:
            cards.append(Card(suit, rank))
    for suit in (Suit.DIAMONDS, Suit.HEARTS):
        for rank in NUMBER_RANKS:
            cards.append(Card(suit, rank))
    return cards


class Deck:
    """
    Face-down draw pile. The list is stored bottom -> top: draw() pops the
    end, put_on_bottom() inserts at index 0.

    Pass ``cards`` (bottom -> top) for a prearranged, unshuffled pile.
    """

    def __init__(self, rng: Optional[random.Random] = None, cards: Optional[Iterable[Card]] = None) -> None:
        if cards is not None:
            self._cards: List[Card] = list(cards)
            return
        self._cards = standard_cards()
        (rng or random.Random()).shuffle(self._cards)
        log.debug("shuffled a fresh deck of %d cards", len(self._cards))

    def draw(self) -> Optional[Card]:
        if not self._cards:
            return None
        return self._cards.pop()

    def put_on_bottom(self, card: Card) -> None:
        self._cards.insert(0, card)

    def put_all_on_bottom(self, cards: Iterable[Card]) -> None:
        # batch keeps its order: first card ends up at the very bottom
        self._cards[0:0] = list(cards)

    def is_empty(self) -> bool:
        return not self._cards

    def remaining_monster_strength(self) -> int:
        return sum(c.strength for c in self._cards if c.kind is CardKind.MONSTER)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
