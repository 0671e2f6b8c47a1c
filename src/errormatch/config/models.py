from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MatcherSettings(BaseModel):
    equality_fallback: Literal["description", "identity"] = "description"
    omit_builtins_module: bool = True
    max_description_length: int | None = Field(default=None, ge=4)

    model_config = ConfigDict(extra="forbid", frozen=True)


DEFAULT_SETTINGS = MatcherSettings()
