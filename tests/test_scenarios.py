from conftest import stacked
from scoundrel.actions import Equip
from scoundrel.actions import Fight
from scoundrel.actions import GameEvent
from scoundrel.actions import Kill
from scoundrel.actions import Lose
from scoundrel.actions import Win
from scoundrel.engine import Game
from scoundrel.errors import GameError


def test_barehanded_when_no_weapon():
    g = Game(deck=stacked("S5", "H3", "D4", "C9", "S2", "C2"))
    g.start_turn()
    assert g.player.health == 20
    assert g.apply(Kill(0)).error is GameError.NO_WEAPON_EQUIPPED
    assert g.apply(Fight(0)).ok
    assert g.player.health == 15


def test_weapon_ceiling_walkthrough():
    g = Game(deck=stacked("D5", "SA", "CA", "S2", "S3", "C3"))
    g.start_turn()
    g.apply(Equip(0))
    assert g.apply(Kill(0)).ok  # Ace
    assert g.player.health == 11
    assert g.player.weapon.last_slain_monster_strength == 14
    assert g.apply(Kill(0)).error is GameError.MONSTER_TOO_STRONG_FOR_WEAPON  # the other Ace
    step = g.apply(Kill(1))  # the 2
    assert step.event is GameEvent.TURN_ENDED
    assert g.player.health == 11
    assert g.player.weapon.last_slain_monster_strength == 2


def test_deck_runs_out_while_alive_is_a_win():
    g = Game(deck=stacked("S8", "H2", "D3", "C4"))
    g.start_turn()
    assert g.is_over()
    g.apply(Fight(0))
    assert g.player.health == 12
    assert g.outcome() == Win(score=12)


def test_death_scores_undrawn_monsters():
    g = Game(deck=stacked("SK", "CQ", "D2", "H9", "S2", "C3", "S4", "H5"))
    g.start_turn()
    g.apply(Fight(0))
    assert not g.is_over()
    g.apply(Fight(0))
    assert g.player.health == 0
    assert g.is_over()
    assert g.outcome() == Lose(score=9)
