from __future__ import annotations

import random
from typing import Callable
from typing import Optional

from .actions import Action
from .actions import CardAction
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
from .errors import GameRuleError
from .logging_utils import get_logger
from .models import Card
from .models import GameInfo
from .player import Player
from .room import Room
from .rules import score_for
from .rules import skip_violation

log = get_logger(__name__)


class Game:
    """
    One play session: owns the deck, the room and the player.

    apply() is the only entry point that mutates state on behalf of the
    player, and it never raises for a rule violation; the error comes back
    in the StepResult with nothing changed.
    """

    def __init__(self, deck: Optional[Deck] = None, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        if deck is None:
            if rng is None and seed is not None:
                rng = random.Random(seed)
            deck = Deck(rng=rng)
        self.deck = deck
        self.room = Room()
        self.player = Player()

        self.turn = 0
        self.last_skipped_turn = 0  # 0 = never skipped

    # ---------- turn flow ----------

    def start_turn(self) -> None:
        self.turn += 1
        self._fill_room()
        log.debug("turn %d: room %s, %d left in deck", self.turn, [c.label for c in self.room], len(self.deck))

    def _fill_room(self) -> None:
        # refill only the empty slots; the carried-over card stays first
        while not self.room.is_full():
            card = self.deck.draw()
            if card is None:
                break
            self.room.add(card)

    def can_skip(self) -> None:
        err = skip_violation(self.room.is_full(), self.turn, self.last_skipped_turn)
        if err is not None:
            raise GameRuleError(err)

    # ---------- actions ----------

    def apply(self, action: Action) -> StepResult:
        try:
            event = self._dispatch(action)
        except GameRuleError as e:
            log.info("turn %d: %s rejected: %s", self.turn, action, e.error.name)
            return StepResult(error=e.error)
        log.debug("turn %d: %s -> %s (health=%d)", self.turn, action, event.name, self.player.health)
        return StepResult(event=event)

    def _dispatch(self, action: Action) -> GameEvent:
        if isinstance(action, Quit):
            return GameEvent.QUIT_GAME
        if isinstance(action, PrintRules):
            return GameEvent.RULES_PRINTED
        if isinstance(action, Skip):
            self.can_skip()
            self.room.clear_into(self.deck)
            self.last_skipped_turn = self.turn
            return GameEvent.TURN_ENDED
        if isinstance(action, Fight):
            return self._resolve(action, self.player.fight)
        if isinstance(action, Kill):
            return self._resolve(action, self.player.kill)
        if isinstance(action, Heal):
            return self._resolve(action, lambda card: self.player.heal(card, self.turn))
        if isinstance(action, Equip):
            return self._resolve(action, self.player.equip_weapon)
        raise TypeError(f"unknown action: {action!r}")

    def _resolve(self, action: CardAction, effect: Callable[[Card], int]) -> GameEvent:
        # look the card up fresh; positions shift after every removal
        card = self.room.get(action.index)
        effect(card)
        self.room.remove(action.index)
        if len(self.room) == 1:
            return GameEvent.TURN_ENDED
        return GameEvent.ACTION_APPLIED

    # ---------- queries ----------

    def info(self) -> GameInfo:
        return GameInfo(
            health=self.player.health,
            remaining_cards=len(self.deck),
            weapon_strength=self.player.weapon.strength,
            last_slain=self.player.weapon.last_slain_monster_strength,
            turn=self.turn,
            last_skipped=self.last_skipped_turn,
            room_cards=self.room.cards(),
        )

    def is_over(self) -> bool:
        return self.deck.is_empty() or self.player.is_dead

    def outcome(self) -> Optional[GameOutcome]:
        if not self.is_over():
            return None
        score = score_for(self.player.health, self.deck.is_empty(), self.deck.remaining_monster_strength())
        if self.player.is_dead:
            return Lose(score)
        return Win(score)
