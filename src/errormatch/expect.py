from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from errormatch.matchers.base import Direction, ExpectationFailed, Matcher, Verdict

if TYPE_CHECKING:
    from errormatch.matchers.predicate import FailureRecorder


class Expectation:
    """Wraps a computation so matchers can be applied with ``to`` and ``to_not``.

    Failed verdicts raise ``ExpectationFailed``, or go to ``recorder`` when
    one is given.
    """

    def __init__(
        self,
        computation: Callable[[], object],
        recorder: FailureRecorder | None = None,
    ) -> None:
        if not callable(computation):
            raise TypeError(f"expect() requires a callable, got {type(computation).__name__}")
        self._computation = computation
        self._recorder = recorder

    def verdict(self, matcher: Matcher, direction: Direction | str = Direction.TO) -> Verdict:
        return matcher.evaluate(direction, self._computation)

    def to(self, matcher: Matcher) -> Verdict:
        return self._assert(matcher, Direction.TO)

    def to_not(self, matcher: Matcher) -> Verdict:
        return self._assert(matcher, Direction.TO_NOT)

    not_to = to_not

    def _assert(self, matcher: Matcher, direction: Direction) -> Verdict:
        verdict = self.verdict(matcher, direction)
        if verdict.passed:
            return verdict
        if self._recorder is not None:
            self._recorder.record_verdict(verdict)
            return verdict
        raise ExpectationFailed(verdict)


def expect(computation: Callable[[], object]) -> Expectation:
    return Expectation(computation)


__all__ = ["Expectation", "ExpectationFailed", "expect"]
