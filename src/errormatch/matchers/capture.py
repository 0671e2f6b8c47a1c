from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapturedOutcome:
    """Result of running a computation once: either nothing was raised or ``error`` was."""

    error: BaseException | None = None

    @property
    def raised(self) -> bool:
        return self.error is not None


NO_ERROR = CapturedOutcome()


def capture(computation: Callable[[], object]) -> CapturedOutcome:
    if not callable(computation):
        raise TypeError(f"Expected a callable computation, got {type(computation).__name__}")
    try:
        computation()
    except KeyboardInterrupt:
        raise
    except BaseException as exc:
        logger.debug("Captured %s from computation", type(exc).__name__)
        return CapturedOutcome(error=exc)
    return NO_ERROR
