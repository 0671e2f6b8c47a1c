from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from errormatch.config.models import DEFAULT_SETTINGS, MatcherSettings
from errormatch.render.describe import describe, describe_expected
from errormatch.render.messages import compose, not_throw_message, throw_message

from .base import Direction, FailureKind, Verdict, coerce_direction
from .capture import capture
from .compare import matches_expected
from .predicate import MatchPredicate, run_predicate

logger = logging.getLogger(__name__)

ExpectedError = BaseException | type[BaseException]


def _validate_expected(expected: object) -> None:
    if expected is None or isinstance(expected, BaseException):
        return
    if isinstance(expected, type) and issubclass(expected, BaseException):
        return
    raise TypeError(
        f"Expected error must be an exception instance or class, got {type(expected).__name__}"
    )


@dataclass(frozen=True)
class ThrowErrorMatcher:
    """Matches a computation against an optional expected error and/or predicate.

    ``to`` passes when the computation raises an error equal to ``expected``
    (any error when omitted) that also satisfies ``predicate``. ``to_not``
    passes when nothing is raised or the raised error differs from
    ``expected``; the predicate plays no part in the negated form.
    """

    expected: ExpectedError | None = None
    predicate: MatchPredicate | None = None
    settings: MatcherSettings = DEFAULT_SETTINGS

    def __post_init__(self) -> None:
        _validate_expected(self.expected)
        if self.predicate is not None and not callable(self.predicate):
            raise TypeError(f"Predicate must be callable, got {type(self.predicate).__name__}")

    def _expected_text(self) -> str | None:
        if self.expected is None:
            return None
        return describe_expected(self.expected, self.settings)

    def evaluate(self, direction: Direction | str, computation: Callable[[], object]) -> Verdict:
        direction = coerce_direction(direction)
        outcome = capture(computation)
        if direction is Direction.TO_NOT:
            verdict = self._evaluate_negated(outcome.error)
        else:
            verdict = self._evaluate_positive(outcome.error)
        logger.debug(
            "throw_error %s verdict: %s",
            direction.value,
            "passed" if verdict.passed else verdict.kind.value,
        )
        return verdict

    def _evaluate_negated(self, error: BaseException | None) -> Verdict:
        if self.predicate is not None:
            logger.debug("Predicate ignored for negated throw_error")
        expected_text = self._expected_text()
        if error is None:
            return Verdict(passed=True, message=[throw_message(expected_text, None)])
        actual_text = describe(error, self.settings)
        if self.expected is not None and not matches_expected(self.expected, error, self.settings):
            return Verdict(passed=True, message=[throw_message(expected_text, actual_text)])
        return Verdict(
            passed=False,
            message=[not_throw_message(expected_text, actual_text)],
            kind=FailureKind.UNEXPECTED_ERROR_UNDER_NEGATION,
        )

    def _evaluate_positive(self, error: BaseException | None) -> Verdict:
        expected_text = self._expected_text()
        with_predicate = self.predicate is not None
        if error is None:
            return Verdict(
                passed=False,
                message=[throw_message(expected_text, None, with_predicate=with_predicate)],
                kind=FailureKind.NO_ERROR_RAISED,
            )

        actual_text = describe(error, self.settings)
        if self.expected is not None and not matches_expected(self.expected, error, self.settings):
            return Verdict(
                passed=False,
                message=[throw_message(expected_text, actual_text)],
                kind=FailureKind.VALUE_MISMATCH,
            )

        outer = throw_message(expected_text, actual_text, with_predicate=with_predicate)
        if self.predicate is not None:
            nested = run_predicate(self.predicate, error)
            if nested:
                return Verdict(
                    passed=False,
                    message=compose([item.message for item in nested], outer),
                    kind=FailureKind.PREDICATE_MISMATCH,
                    nested=nested,
                )
        return Verdict(passed=True, message=[outer])


def throw_error(
    expected: ExpectedError | None = None,
    predicate: MatchPredicate | None = None,
    *,
    settings: MatcherSettings | None = None,
) -> ThrowErrorMatcher:
    return ThrowErrorMatcher(
        expected=expected,
        predicate=predicate,
        settings=settings or DEFAULT_SETTINGS,
    )


def evaluate(
    direction: Direction | str,
    computation: Callable[[], object],
    expected: ExpectedError | None = None,
    predicate: MatchPredicate | None = None,
    *,
    settings: MatcherSettings | None = None,
) -> Verdict:
    return throw_error(expected, predicate, settings=settings).evaluate(direction, computation)
