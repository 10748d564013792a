"""Tests for the key table"""
import pytest

from git_branch_explorer.ui.controls import CONTROLS, Action, Control, KeyMapper


class TestKeyMapper:
    """Test key resolution and help text."""

    @pytest.mark.parametrize(
        "key,action",
        [
            ("s", Action.SWITCH),
            ("f", Action.FETCH),
            ("r", Action.REFRESH),
            ("up", Action.MOVE_UP),
            ("down", Action.MOVE_DOWN),
            ("q", Action.QUIT),
        ],
    )
    def test_resolve(self, key, action):
        assert KeyMapper().resolve(key) == action

    @pytest.mark.parametrize("key", ["x", "S", "enter", "ctrl+q", ""])
    def test_unknown_keys(self, key):
        assert KeyMapper().resolve(key) is None

    def test_every_action_has_a_key(self):
        assert {control.action for control in CONTROLS} == set(Action)

    def test_help_text_follows_table_order(self):
        assert KeyMapper().help_text() == (
            "Switch <s> | Fetch <f> | Refresh <r> | Up <↑> | Down <↓> | Quit <q>"
        )

    def test_first_match_wins(self):
        mapper = KeyMapper([
            Control(Action.QUIT, "x", "Quit"),
            Control(Action.REFRESH, "x", "Refresh"),
        ])
        assert mapper.resolve("x") == Action.QUIT
        assert mapper.help_text() == "Quit <x> | Refresh <x>"
