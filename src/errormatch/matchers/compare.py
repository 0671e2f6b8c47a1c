from __future__ import annotations

import logging

from errormatch.config.models import DEFAULT_SETTINGS, MatcherSettings
from errormatch.render.describe import full_description

logger = logging.getLogger(__name__)


def is_equatable(error: BaseException) -> bool:
    """True when the error's class defines its own value equality."""
    return type(error).__eq__ is not object.__eq__


def equal_errors(
    expected: BaseException,
    actual: BaseException,
    settings: MatcherSettings | None = None,
) -> bool:
    """Compare two captured errors.

    Errors of different classes are never equal, even when their
    descriptions are identical; the description fallback only applies
    within a single class. Same-class errors use the class's ``__eq__``
    when it defines one, otherwise the untruncated descriptions (or
    identity, with ``equality_fallback="identity"``).
    """
    settings = settings or DEFAULT_SETTINGS
    if type(expected) is not type(actual):
        return False
    if is_equatable(expected):
        return bool(expected == actual)
    if settings.equality_fallback == "identity":
        return expected is actual
    # Weak mode: distinct errors with identical descriptions compare equal.
    logger.debug("Comparing %s errors by description", type(expected).__qualname__)
    return full_description(expected, settings) == full_description(actual, settings)


def matches_expected(
    expected: BaseException | type[BaseException],
    actual: BaseException,
    settings: MatcherSettings | None = None,
) -> bool:
    if isinstance(expected, type):
        return isinstance(actual, expected)
    return equal_errors(expected, actual, settings)
