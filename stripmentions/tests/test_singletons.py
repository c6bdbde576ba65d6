"""Tests for the singleton registry."""

from __future__ import annotations

from stripmentions.util.singletons import _reset_fns, register_singleton, reset_all_singletons


class TestSingletonRegistry:
    def setup_method(self) -> None:
        self._original = list(_reset_fns)

    def teardown_method(self) -> None:
        _reset_fns.clear()
        _reset_fns.extend(self._original)

    def test_register_returns_function(self) -> None:
        def _reset() -> None:
            pass

        assert register_singleton(_reset) is _reset
        assert _reset in _reset_fns

    def test_register_twice_is_single_entry(self) -> None:
        def _reset() -> None:
            pass

        register_singleton(_reset)
        register_singleton(_reset)
        assert _reset_fns.count(_reset) == 1

    def test_reset_all_invokes_every_resetter(self) -> None:
        calls: list[int] = []

        @register_singleton
        def _r1() -> None:
            calls.append(1)

        @register_singleton
        def _r2() -> None:
            calls.append(2)

        reset_all_singletons()
        assert calls == [1, 2]
