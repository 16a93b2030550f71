from __future__ import annotations

from enum import Enum


class GameError(Enum):
    """Every way the rules can reject an action. All are recoverable."""

    ROOM_FULL = "the room is already full"
    NOT_A_WEAPON = "that card is not a weapon"
    NOT_A_POTION = "that card is not a potion"
    CANNOT_SKIP = "a room can only be skipped before any card is resolved"
    CANNOT_SKIP_TWO_IN_ROW = "cannot skip two rooms in a row"
    NOT_A_MONSTER = "that card is not a monster"
    INDEX_OUT_OF_BOUNDS = "there is no card at that position"
    NO_WEAPON_EQUIPPED = "no weapon equipped"
    MONSTER_TOO_STRONG_FOR_WEAPON = "weapon can only slay monsters weaker than its last kill"

    @property
    def message(self) -> str:
        return self.value


class GameRuleError(Exception):
    def __init__(self, error: GameError) -> None:
        super().__init__(error.message)
        self.error = error


class UiError(Enum):
    EMPTY_INPUT = "type a command (r shows the rules)"
    UNKNOWN_COMMAND = "unknown command"
    MISSING_INDEX = "that command needs a card position"
    INVALID_INDEX = "card position must be a number"
    INDEX_STARTS_AT_ONE = "card positions start at 1"
    INPUT_READ_FAILED = "could not read input"

    @property
    def message(self) -> str:
        return self.value


class InputError(Exception):
    """Raised by the presentation layer. Only a failed read is fatal."""

    def __init__(self, reason: UiError, detail: str = "") -> None:
        msg = reason.message if not detail else f"{reason.message}: {detail}"
        super().__init__(msg)
        self.reason = reason

    @property
    def fatal(self) -> bool:
        return self.reason is UiError.INPUT_READ_FAILED
