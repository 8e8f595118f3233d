"""Tests for the generator form state."""

from dataclasses import replace

import pytest

from passgen import PasswordOptions, StrengthLabel
from passgen.form import (
    change_option,
    expire_copied,
    initial_state,
    mark_copied,
    parse_length,
    regenerate,
)


@pytest.fixture
def state():
    return initial_state()


class TestInitialState:
    def test_defaults(self, state):
        assert state.options == PasswordOptions()
        assert len(state.password) == 16
        assert state.strength is StrengthLabel.STRONG
        assert state.copied is False

    def test_custom_options(self):
        s = initial_state(PasswordOptions(length=8, uppercase=False, numbers=False))
        assert len(s.password) == 8
        assert s.password.islower()
        assert s.strength is StrengthLabel.WEAK


class TestChangeOption:
    def test_length_regenerates(self, state):
        s = change_option(state, "length", 24)
        assert s.options.length == 24
        assert len(s.password) == 24
        assert state.options.length == 16  # input state untouched

    @pytest.mark.parametrize("given, expected", [(4, 8), (100, 32), (8, 8), (32, 32)])
    def test_length_clamped(self, state, given, expected):
        assert change_option(state, "length", given).options.length == expected

    def test_toggle_class(self, state):
        s = change_option(state, "symbols", True)
        assert s.options.symbols is True
        assert s.options.variety_count == 4

    def test_strength_follows_options(self, state):
        s = change_option(state, "length", 12)
        assert s.strength is StrengthLabel.MEDIUM
        s = change_option(s, "numbers", False)
        s = change_option(s, "uppercase", False)
        assert s.strength is StrengthLabel.WEAK

    def test_last_class_cannot_be_disabled(self):
        s = initial_state(PasswordOptions(uppercase=False, lowercase=False, numbers=True))
        assert change_option(s, "numbers", False) is s

    def test_rejected_change_keeps_password(self):
        s = initial_state(PasswordOptions(uppercase=False, lowercase=True, numbers=False))
        after = change_option(s, "lowercase", False)
        assert after.password == s.password
        assert after.options.lowercase is True

    def test_unknown_key(self, state):
        with pytest.raises(KeyError):
            change_option(state, "emoji", True)

    def test_keeps_copied_indicator(self, state):
        s = change_option(mark_copied(state, now=100.0), "symbols", True)
        assert s.copied is True
        assert s.copied_at == 100.0
        # Still expires on the original schedule
        assert expire_copied(s, now=102.0).copied is False


class TestRegenerate:
    def test_same_options_new_password(self, state):
        s = regenerate(state)
        assert s.options == state.options
        assert len(s.password) == len(state.password)
        assert s.password != state.password

    def test_keeps_copied_indicator(self, state):
        s = regenerate(mark_copied(state, now=5.0))
        assert s.copied is True
        assert s.copied_at == 5.0


class TestParseLength:
    @pytest.mark.parametrize("raw, expected", [
        ("12", 12),
        (" 20 ", 20),
        (20, 20),
        ("", 8),
        ("abc", 8),
        (None, 8),
        ("0", 8),
        ("99", 32),
        ("-5", 8),
        ("12.5", 12),
        ("20abc", 20),
        ("  +24", 24),
        ("abc20", 8),
    ])
    def test_parse(self, raw, expected):
        assert parse_length(raw) == expected


class TestCopiedIndicator:
    def test_mark(self, state):
        s = mark_copied(state, now=10.0)
        assert s.copied is True
        assert s.copied_at == 10.0
        assert s.password == state.password

    def test_nothing_to_copy(self, state):
        empty = replace(state, password="")
        assert mark_copied(empty, now=1.0) is empty

    def test_stays_on_before_timeout(self, state):
        s = mark_copied(state, now=10.0)
        assert expire_copied(s, now=11.5) is s

    def test_expires_after_timeout(self, state):
        s = expire_copied(mark_copied(state, now=10.0), now=12.0)
        assert s.copied is False
        assert s.copied_at is None

    def test_expire_noop_when_not_copied(self, state):
        assert expire_copied(state, now=1000.0) is state
