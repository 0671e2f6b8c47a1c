from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Callable

from .base import ExpectationFailed, NestedFailure, Verdict

if TYPE_CHECKING:
    from errormatch.expect import Expectation

# Called with the error, or with the error and a FailureRecorder.
MatchPredicate = Callable[..., object]


class FailureRecorder:
    """Collects failures from inside a predicate without stopping it.

    Predicates that accept a second positional argument receive one.
    ``fail`` and ``check`` record a message, and expectations created
    with ``expect`` record their failed verdicts instead of raising.
    """

    def __init__(self) -> None:
        self._failures: list[NestedFailure] = []

    @property
    def failures(self) -> list[NestedFailure]:
        return list(self._failures)

    def fail(self, message: str = "fail() always fails", *, exception_type: str = "AssertionError") -> None:
        self._failures.append(NestedFailure(message=message, exception_type=exception_type))

    def check(self, condition: object, message: str) -> bool:
        if not condition:
            self.fail(message)
        return bool(condition)

    def record_verdict(self, verdict: Verdict) -> None:
        for line in verdict.message:
            self.fail(line, exception_type=ExpectationFailed.__name__)

    def expect(self, computation: Callable[[], object]) -> Expectation:
        from errormatch.expect import Expectation

        return Expectation(computation, recorder=self)


def _accepts_recorder(predicate: MatchPredicate) -> bool:
    try:
        inspect.signature(predicate).bind(None, None)
    except (TypeError, ValueError):
        return False
    return True


def run_predicate(predicate: MatchPredicate, error: BaseException | None) -> list[NestedFailure]:
    if error is None:
        raise ValueError("Predicate can only be evaluated against a captured error")
    recorder = FailureRecorder()
    try:
        if _accepts_recorder(predicate):
            predicate(error, recorder)
        else:
            predicate(error)
    except ExpectationFailed as exc:
        recorder.record_verdict(exc.verdict)
    except AssertionError as exc:
        recorder.fail(str(exc) or f"{type(exc).__name__} raised in block", exception_type=type(exc).__name__)
    except Exception:
        raise
    except (KeyboardInterrupt, SystemExit, GeneratorExit):
        raise
    except BaseException as exc:
        # Test framework outcomes such as pytest.fail() derive from BaseException.
        recorder.fail(str(exc) or f"{type(exc).__name__} raised in block", exception_type=type(exc).__name__)
    return recorder.failures
