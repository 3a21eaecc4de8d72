from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreditCardApplication(BaseModel):
    model_config = ConfigDict(frozen=True)

    gross_annual_income: float = Field(default=0, ge=0)
    age: int = Field(default=0, ge=0)
    frequent_flyer_number: str = ""

    @field_validator("frequent_flyer_number", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "CreditCardApplication":
        return cls.model_validate(d or {})

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="python")
