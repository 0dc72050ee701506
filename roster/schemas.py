"""
Pydantic schemas for the roster API.
"""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from roster.db import PlayerRecord, TeamRecord

# Booleans and numeric strings are rejected; integer salaries stay integers.
Salary = Union[
    Annotated[StrictInt, Field(ge=0)],
    Annotated[StrictFloat, Field(ge=0, allow_inf_nan=False)],
]


class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    mascot: str = Field(..., min_length=1, max_length=100)


class PlayerCreate(BaseModel):
    firstName: str = Field(..., min_length=1, max_length=100)
    lastName: str = Field(..., min_length=1, max_length=100)
    salary: Salary

    def to_record(self) -> PlayerRecord:
        return PlayerRecord(
            first_name=self.firstName,
            last_name=self.lastName,
            salary=self.salary,
        )


class PlayerResponse(BaseModel):
    firstName: str | None = None
    lastName: str | None = None
    salary: int | float | None = None


class TeamResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str | None = None
    mascot: str | None = None
    players: list[PlayerResponse] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: TeamRecord) -> "TeamResponse":
        return cls.model_validate(record.as_dict())


class ErrorResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
