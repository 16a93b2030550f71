from __future__ import annotations

from typing import Callable
from typing import Dict

from ..actions import Action
from ..actions import Equip
from ..actions import Fight
from ..actions import Heal
from ..actions import Kill
from ..actions import PrintRules
from ..actions import Quit
from ..actions import Skip
from ..errors import InputError
from ..errors import UiError

_BARE: Dict[str, Callable[[], Action]] = {
    "q": Quit,
    "quit": Quit,
    "exit": Quit,
    "s": Skip,
    "skip": Skip,
    "r": PrintRules,
    "rules": PrintRules,
    "help": PrintRules,
}

_INDEXED: Dict[str, Callable[[int], Action]] = {
    "f": Fight,
    "fight": Fight,
    "a": Kill,
    "attack": Kill,
    "e": Equip,
    "equip": Equip,
    "h": Heal,
    "heal": Heal,
}

HELP = "q quit | s skip room | r rules | f N fight | a N attack with weapon | e N equip | h N heal"


def _parse_position(tok: str) -> int:
    try:
        pos = int(tok)
    except ValueError:
        raise InputError(UiError.INVALID_INDEX, tok) from None
    if pos == 0:
        raise InputError(UiError.INDEX_STARTS_AT_ONE)
    if pos < 0:
        raise InputError(UiError.INVALID_INDEX, tok)
    return pos - 1


def parse_action(line: str) -> Action:
    """Turn a typed line into an Action. Positions are 1-based on input."""
    parts = (line or "").split()
    if not parts:
        raise InputError(UiError.EMPTY_INPUT)
    verb = parts[0].lower()

    if verb in _BARE:
        return _BARE[verb]()
    if verb in _INDEXED:
        if len(parts) < 2:
            raise InputError(UiError.MISSING_INDEX, verb)
        return _INDEXED[verb](_parse_position(parts[1]))

    # allow the glued form "f2"
    if verb[:1] in _INDEXED and verb[1:].lstrip("-").isdigit():
        return _INDEXED[verb[:1]](_parse_position(verb[1:]))
    raise InputError(UiError.UNKNOWN_COMMAND, parts[0])
