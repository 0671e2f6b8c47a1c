from __future__ import annotations

from dataclasses import dataclass, field

from errormatch.config.models import MatcherSettings
from errormatch.render.describe import describe, describe_expected


class Mood:
    class Laugh(Exception):
        pass


class Coded(Exception):
    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    def describe_error(self) -> str:
        return f"code={self.index}"


@dataclass
class Parameterized(Exception):
    x: int
    label: str = "a"
    hidden: int = field(default=0, repr=False)


def test_default_description_uses_namespace_and_variant() -> None:
    assert describe(Mood.Laugh()) == f"{__name__}.Mood.Laugh"


def test_args_are_rendered_in_order() -> None:
    assert describe(Mood.Laugh("a", 2)) == f"{__name__}.Mood.Laugh('a', 2)"


def test_dataclass_fields_are_rendered() -> None:
    assert describe(Parameterized(x=1)) == f"{__name__}.Parameterized(x=1, label='a')"


def test_builtins_module_is_omitted_by_default() -> None:
    assert describe(ValueError("boom")) == "ValueError('boom')"
    settings = MatcherSettings(omit_builtins_module=False)
    assert describe(ValueError("boom"), settings) == "builtins.ValueError('boom')"


def test_custom_description_wins() -> None:
    assert describe(Coded(0)) == "code=0"
    assert describe(Coded(1)) != describe(Coded(0))


def test_long_descriptions_are_truncated() -> None:
    settings = MatcherSettings(max_description_length=12)

    text = describe(ValueError("x" * 50), settings)

    assert text == "ValueErro..."
    assert len(text) == 12


def test_describe_expected_class() -> None:
    assert describe_expected(KeyError) == "KeyError"
    assert describe_expected(Mood.Laugh) == f"{__name__}.Mood.Laugh"
    assert describe_expected(Mood.Laugh()) == f"{__name__}.Mood.Laugh"


def test_describe_is_deterministic() -> None:
    error = Parameterized(x=3)

    assert describe(error) == describe(error)
    assert error.x == 3
