from __future__ import annotations

NO_ERROR_TEXT = "no error"
SATISFIES_BLOCK = "that satisfies block"


def _wrap(description: str) -> str:
    return f"<{description}>"


def _expectation(verb: str, expected: str | None, with_predicate: bool) -> str:
    parts = [f"expected to {verb} error"]
    if expected is not None:
        parts.append(_wrap(expected))
    if with_predicate:
        parts.append(SATISFIES_BLOCK)
    return " ".join(parts)


def throw_message(expected: str | None, actual: str | None, *, with_predicate: bool = False) -> str:
    got = _wrap(actual) if actual is not None else NO_ERROR_TEXT
    return f"{_expectation('throw', expected, with_predicate)}, got {got}"


def not_throw_message(expected: str | None, actual: str) -> str:
    if expected is None:
        return f"expected to not throw any error, got {_wrap(actual)}"
    return f"expected to not throw error {_wrap(expected)}, got {_wrap(actual)}"


def compose(nested: list[str], outer: str) -> list[str]:
    return [*nested, outer]
