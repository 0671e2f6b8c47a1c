from .base import Direction, ExpectationFailed, FailureKind, Matcher, NestedFailure, Verdict
from .capture import NO_ERROR, CapturedOutcome, capture
from .compare import equal_errors, is_equatable, matches_expected
from .predicate import FailureRecorder, run_predicate
from .throw_error import ThrowErrorMatcher, evaluate, throw_error

__all__ = [
    "NO_ERROR",
    "CapturedOutcome",
    "Direction",
    "ExpectationFailed",
    "FailureKind",
    "FailureRecorder",
    "Matcher",
    "NestedFailure",
    "ThrowErrorMatcher",
    "Verdict",
    "capture",
    "equal_errors",
    "evaluate",
    "is_equatable",
    "matches_expected",
    "run_predicate",
    "throw_error",
]
