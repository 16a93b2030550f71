import pytest

from scoundrel.actions import Equip
from scoundrel.actions import Fight
from scoundrel.actions import Heal
from scoundrel.actions import Kill
from scoundrel.actions import PrintRules
from scoundrel.actions import Quit
from scoundrel.actions import Skip
from scoundrel.errors import InputError
from scoundrel.errors import UiError
from scoundrel.ui.commands import parse_action


@pytest.mark.parametrize(
    "line, action",
    [
        ("q", Quit()),
        ("s", Skip()),
        ("r", PrintRules()),
        ("f 1", Fight(0)),
        ("a 2", Kill(1)),
        ("e 3", Equip(2)),
        ("h 4", Heal(3)),
        ("  F   2  ", Fight(1)),
        ("f2", Fight(1)),
        ("attack 1", Kill(0)),
        ("quit", Quit()),
    ],
)
def test_parses_commands(line, action):
    assert parse_action(line) == action


@pytest.mark.parametrize(
    "line, reason",
    [
        ("", UiError.EMPTY_INPUT),
        ("   ", UiError.EMPTY_INPUT),
        ("x", UiError.UNKNOWN_COMMAND),
        ("dance 2", UiError.UNKNOWN_COMMAND),
        ("f", UiError.MISSING_INDEX),
        ("h", UiError.MISSING_INDEX),
        ("f two", UiError.INVALID_INDEX),
        ("f -1", UiError.INVALID_INDEX),
        ("f 0", UiError.INDEX_STARTS_AT_ONE),
        ("a0", UiError.INDEX_STARTS_AT_ONE),
    ],
)
def test_rejects_bad_input(line, reason):
    with pytest.raises(InputError) as exc:
        parse_action(line)
    assert exc.value.reason is reason
    assert not exc.value.fatal


def test_only_read_failure_is_fatal():
    assert InputError(UiError.INPUT_READ_FAILED).fatal
    assert not InputError(UiError.UNKNOWN_COMMAND).fatal
