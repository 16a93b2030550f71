from __future__ import annotations

from typing import Optional

from ..actions import GameEvent
from ..actions import GameOutcome
from ..actions import Lose
from ..engine import Game
from ..errors import GameError
from ..errors import InputError
from ..logging_utils import get_logger
from ..models import GameInfo
from .commands import parse_action

log = get_logger(__name__)


def outcome_line(outcome: GameOutcome) -> str:
    if isinstance(outcome, Lose):
        return f"You lose. Score: -{outcome.score}"
    return f"You win! Score: {outcome.score}"


class _SessionEnded(Exception):
    pass


class BaseUI:
    """
    Shared session loop. Subclasses only draw and read:
    render(), read_line(), show_message(), show_rules(), and optionally
    show_error() / show_outcome().
    """

    # set when the session ended because input could not be read
    input_failed = False

    def render(self, info: GameInfo) -> None:
        raise NotImplementedError

    def read_line(self, prompt: str = "> ") -> str:
        """Return one line of input or raise a fatal InputError."""
        raise NotImplementedError

    def show_message(self, msg: str) -> None:
        raise NotImplementedError

    def show_error(self, msg: str) -> None:
        self.show_message(msg)

    def show_rules(self) -> None:
        raise NotImplementedError

    def show_outcome(self, outcome: GameOutcome) -> None:
        self.show_message(outcome_line(outcome))

    def describe_rule_error(self, err: GameError) -> str:
        return f"Can't do that: {err.message}."

    def _read(self, prompt: str = "> ") -> str:
        try:
            return self.read_line(prompt)
        except InputError as e:
            log.error("stopping session: %s", e)
            self.input_failed = True
            self.show_error(str(e))
            raise _SessionEnded() from e

    def run_loop(self, game: Game) -> Optional[GameOutcome]:
        """Play until the game is over, the player quits, or input dies."""
        try:
            quit_requested = self._play(game)
        except _SessionEnded:
            return None
        if quit_requested:
            return None

        outcome = game.outcome()
        if outcome is not None:
            self.render(game.info())
            self.show_outcome(outcome)
        return outcome

    def _play(self, game: Game) -> bool:
        notice = ""
        while not game.is_over():
            game.start_turn()
            while True:
                self.render(game.info())
                if notice:
                    self.show_error(notice)
                    notice = ""
                try:
                    action = parse_action(self._read())
                except InputError as e:
                    notice = str(e)
                    continue

                step = game.apply(action)
                if not step.ok:
                    notice = self.describe_rule_error(step.error)
                    continue
                if step.event is GameEvent.QUIT_GAME:
                    return True
                if step.event is GameEvent.RULES_PRINTED:
                    self.show_rules()
                    self._read("press Enter to return to the room ")
                    continue
                # the final partial room ends as soon as one card is resolved
                if game.is_over() or step.event is GameEvent.TURN_ENDED:
                    break
        return False
