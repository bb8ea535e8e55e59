from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from coursecrafter.schemas.catalog import Course


class CreditRequirements(BaseModel):
    min: float = Field(default=0, ge=0)
    max: float = Field(ge=0)

    @model_validator(mode="after")
    def validate_range(self) -> "CreditRequirements":
        if self.min > self.max:
            raise ValueError("min credits cannot exceed max credits")
        return self

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


class Cart(BaseModel):
    """A student's request: courses that must appear plus two optional pools."""

    model_config = ConfigDict(populate_by_name=True)

    required: list[Course] = Field(default_factory=list)
    choose_any: list[Course] = Field(default_factory=list, alias="chooseAny")
    choose_one: list[list[Course]] = Field(default_factory=list, alias="chooseOne")
    credit_reqs: CreditRequirements = Field(alias="creditReqs")

    @field_validator("choose_one")
    @classmethod
    def validate_choose_one(cls, value: list[list[Course]]) -> list[list[Course]]:
        if any(not group for group in value):
            raise ValueError("chooseOne groups must contain at least one course")
        return value

    def is_empty(self) -> bool:
        return not self.required and not self.choose_any and not self.choose_one
