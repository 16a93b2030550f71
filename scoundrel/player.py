from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

from .errors import GameError
from .errors import GameRuleError
from .models import Card
from .models import CardKind
from .models import Weapon
from .rules import MAX_HEALTH
from .rules import barehanded_damage
from .rules import clamp_health
from .rules import weapon_can_kill
from .rules import weapon_damage


def _require(card: Card, kind: CardKind, error: GameError) -> None:
    if card.kind is not kind:
        raise GameRuleError(error)


@dataclass
class Player:
    """
    Health plus the equipped weapon. Every method validates all of its guards
    before touching state and returns the health delta it applied.
    The card argument is never removed from anywhere; the caller does that.
    """

    health: int = MAX_HEALTH
    weapon: Weapon = field(default_factory=Weapon)
    last_healed_turn: int = 0

    def fight(self, card: Card) -> int:
        _require(card, CardKind.MONSTER, GameError.NOT_A_MONSTER)
        damage = barehanded_damage(card.strength, self.health)
        self.health = clamp_health(self.health - damage)
        return -damage

    def kill(self, card: Card) -> int:
        _require(card, CardKind.MONSTER, GameError.NOT_A_MONSTER)
        if not self.weapon.equipped:
            raise GameRuleError(GameError.NO_WEAPON_EQUIPPED)
        if not weapon_can_kill(self.weapon, card.strength):
            raise GameRuleError(GameError.MONSTER_TOO_STRONG_FOR_WEAPON)

        damage = weapon_damage(card.strength, self.weapon, self.health)
        self.health = clamp_health(self.health - damage)
        # new ceiling, even when the weapon absorbed everything
        self.weapon.last_slain_monster_strength = card.strength
        return -damage

    def equip_weapon(self, card: Card) -> int:
        _require(card, CardKind.WEAPON, GameError.NOT_A_WEAPON)
        self.weapon = Weapon(strength=card.strength, last_slain_monster_strength=0)
        return 0

    def heal(self, card: Card, current_turn: int) -> int:
        """A second potion in the same turn is wasted, not rejected."""
        _require(card, CardKind.POTION, GameError.NOT_A_POTION)
        if self.last_healed_turn == current_turn:
            return 0
        before = self.health
        self.health = clamp_health(self.health + card.strength)
        self.last_healed_turn = current_turn
        return self.health - before

    @property
    def is_dead(self) -> bool:
        return self.health == 0
