"""Textual descriptions of error values used in failure messages."""

from __future__ import annotations

import dataclasses
from typing import Protocol, runtime_checkable

from errormatch.config.models import DEFAULT_SETTINGS, MatcherSettings


@runtime_checkable
class DescribableError(Protocol):
    """Errors implementing ``describe_error`` control how they appear in messages."""

    def describe_error(self) -> str:
        ...


def _qualified_name(cls: type, settings: MatcherSettings) -> str:
    module = cls.__module__
    if not module or (module == "builtins" and settings.omit_builtins_module):
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def _payload(error: BaseException) -> str:
    if dataclasses.is_dataclass(error):
        fields = [
            f"{item.name}={getattr(error, item.name)!r}"
            for item in dataclasses.fields(error)
            if item.repr
        ]
        return f"({', '.join(fields)})" if fields else ""
    if error.args:
        return f"({', '.join(repr(arg) for arg in error.args)})"
    return ""


def _truncate(text: str, settings: MatcherSettings) -> str:
    limit = settings.max_description_length
    if limit is None or len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def full_description(error: BaseException, settings: MatcherSettings | None = None) -> str:
    """Untruncated description; equality checks compare on this."""
    settings = settings or DEFAULT_SETTINGS
    if isinstance(error, DescribableError):
        return str(error.describe_error())
    return _qualified_name(type(error), settings) + _payload(error)


def describe(error: BaseException, settings: MatcherSettings | None = None) -> str:
    settings = settings or DEFAULT_SETTINGS
    return _truncate(full_description(error, settings), settings)


def describe_expected(
    expected: BaseException | type[BaseException], settings: MatcherSettings | None = None
) -> str:
    """Describe an expected error, which may be an instance or an exception class."""
    settings = settings or DEFAULT_SETTINGS
    if isinstance(expected, type):
        return _truncate(_qualified_name(expected, settings), settings)
    return describe(expected, settings)
