from .config import DEFAULT_SETTINGS, MatcherSettings, load_settings
from .expect import Expectation, expect
from .matchers import (
    CapturedOutcome,
    Direction,
    ExpectationFailed,
    FailureKind,
    FailureRecorder,
    NestedFailure,
    ThrowErrorMatcher,
    Verdict,
    capture,
    equal_errors,
    evaluate,
    run_predicate,
    throw_error,
)
from .render import DescribableError, describe

__all__ = [
    "DEFAULT_SETTINGS",
    "CapturedOutcome",
    "DescribableError",
    "Direction",
    "Expectation",
    "ExpectationFailed",
    "FailureKind",
    "FailureRecorder",
    "MatcherSettings",
    "NestedFailure",
    "ThrowErrorMatcher",
    "Verdict",
    "capture",
    "describe",
    "equal_errors",
    "evaluate",
    "expect",
    "load_settings",
    "run_predicate",
    "throw_error",
]
