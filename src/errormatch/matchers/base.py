from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable


class Direction(str, Enum):
    TO = "to"
    TO_NOT = "to_not"


class FailureKind(str, Enum):
    NO_ERROR_RAISED = "no_error_raised"
    VALUE_MISMATCH = "value_mismatch"
    PREDICATE_MISMATCH = "predicate_mismatch"
    UNEXPECTED_ERROR_UNDER_NEGATION = "unexpected_error_under_negation"


@dataclass(frozen=True)
class NestedFailure:
    message: str
    exception_type: str = "AssertionError"


@dataclass(frozen=True)
class Verdict:
    passed: bool
    message: list[str]
    kind: FailureKind | None = None
    nested: list[NestedFailure] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "kind": self.kind.value if self.kind is not None else None,
            "message": list(self.message),
            "nested": [
                {"message": item.message, "exception_type": item.exception_type}
                for item in self.nested
            ],
        }


@runtime_checkable
class Matcher(Protocol):
    def evaluate(self, direction: Direction | str, computation: Callable[[], object]) -> Verdict:
        ...


def coerce_direction(direction: Direction | str) -> Direction:
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(direction)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in Direction)
        raise ValueError(f"Unknown direction: {direction!r} (expected one of {allowed})") from exc


class ExpectationFailed(AssertionError):
    """Raised by ``Expectation`` when a verdict fails; carries the verdict."""

    def __init__(self, verdict: Verdict) -> None:
        super().__init__(verdict.text)
        self.verdict = verdict
