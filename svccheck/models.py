from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, model_validator


class Defaults(BaseModel):
    timeout_s: int = Field(default=5, ge=1)


class TcpTarget(BaseModel):
    id: str = Field(..., min_length=1)
    host: str = Field(..., min_length=1)
    port: int = Field(..., ge=1, le=65535)


class Registry(BaseModel):
    defaults: Defaults = Defaults()
    targets: List[TcpTarget] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_target_ids(self) -> "Registry":
        ids = [t.id for t in self.targets]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"target ids must be unique, repeated: {', '.join(dupes)}")
        return self
