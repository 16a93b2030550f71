from __future__ import annotations

from typing import Optional

from .errors import GameError
from .models import Weapon

# Single source of truth for rule helpers.
# NO imports from engine/UI here.

MAX_HEALTH = 20
ROOM_CAPACITY = 4


def clamp_health(value: int) -> int:
    return max(0, min(MAX_HEALTH, value))


def barehanded_damage(monster_strength: int, health: int) -> int:
    """Damage taken fighting with bare hands, never more than the health left."""
    return min(monster_strength, health)


def weapon_damage(monster_strength: int, weapon: Weapon, health: int) -> int:
    """Damage that gets past the weapon, floored at 0 and capped at health."""
    return min(max(monster_strength - weapon.strength, 0), health)


def weapon_can_kill(weapon: Weapon, monster_strength: int) -> bool:
    """A used weapon only keeps working on monsters strictly weaker than its last kill."""
    if weapon.last_slain_monster_strength == 0:
        return True
    return monster_strength < weapon.last_slain_monster_strength


def skip_violation(room_full: bool, turn: int, last_skipped_turn: int) -> Optional[GameError]:
    """Return why the current room cannot be skipped, or None when it can."""
    if not room_full:
        return GameError.CANNOT_SKIP
    if turn != 1 and turn - last_skipped_turn == 1:
        return GameError.CANNOT_SKIP_TWO_IN_ROW
    return None


def score_for(health: int, deck_empty: bool, remaining_monster_strength: int) -> int:
    """Survivors score their health; the fallen score what was left undrawn."""
    if deck_empty:
        return health
    return remaining_monster_strength
