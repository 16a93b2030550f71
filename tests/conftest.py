# Ensure repo root is importable as a package during pytest runs
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from scoundrel.deck import Deck  # noqa: E402
from scoundrel.models import Card  # noqa: E402
from scoundrel.models import Rank  # noqa: E402
from scoundrel.models import Suit  # noqa: E402

_SUITS = {"S": Suit.SPADES, "C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS}
_FACES = {"J": Rank.JACK, "Q": Rank.QUEEN, "K": Rank.KING, "A": Rank.ACE}


def card(code: str) -> Card:
    """'S5' -> 5 of Spades, 'DA' -> Ace of Diamonds, 'H10' -> 10 of Hearts."""
    suit = _SUITS[code[0]]
    tail = code[1:]
    rank = _FACES[tail] if tail in _FACES else Rank(int(tail))
    return Card(suit, rank)


def stacked(*codes: str) -> Deck:
    """Prearranged deck; the first code is the first card drawn."""
    return Deck(cards=[card(c) for c in reversed(codes)])


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("SCOUNDREL_UI", "SCOUNDREL_SEED", "SCOUNDREL_LOG_LEVEL", "SCOUNDREL_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)
