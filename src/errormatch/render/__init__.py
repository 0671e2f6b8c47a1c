from .describe import DescribableError, describe, describe_expected, full_description
from .messages import compose, not_throw_message, throw_message

__all__ = [
    "DescribableError",
    "compose",
    "describe",
    "describe_expected",
    "full_description",
    "not_throw_message",
    "throw_message",
]
