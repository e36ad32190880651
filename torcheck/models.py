from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CheckResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    is_tor: bool = Field(alias="IsTor", strict=True)
