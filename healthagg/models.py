from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field, AnyHttpUrl


class Defaults(BaseModel):
    timeout_s: float = Field(default=3, gt=0)
    connect_timeout_s: Optional[float] = Field(default=None, gt=0)


class TargetEntry(BaseModel):
    url: AnyHttpUrl


class Registry(BaseModel):
    defaults: Defaults = Defaults()
    targets: List[TargetEntry] = Field(default_factory=list)
