from __future__ import annotations

import sys

import pytest

from errormatch.matchers.capture import NO_ERROR, capture


def test_capture_without_error() -> None:
    calls: list[int] = []

    outcome = capture(lambda: calls.append(1))

    assert outcome is NO_ERROR
    assert not outcome.raised
    assert calls == [1]


def test_capture_absorbs_error() -> None:
    error = RuntimeError("boom")

    def computation() -> None:
        raise error

    outcome = capture(computation)

    assert outcome.raised
    assert outcome.error is error


def test_capture_absorbs_system_exit() -> None:
    outcome = capture(lambda: sys.exit(3))

    assert isinstance(outcome.error, SystemExit)
    assert outcome.error.code == 3


def test_capture_lets_keyboard_interrupt_through() -> None:
    def computation() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        capture(computation)


def test_capture_rejects_non_callable() -> None:
    with pytest.raises(TypeError):
        capture(42)  # type: ignore[arg-type]
