from datetime import datetime
from typing import List, Optional

from pydantic import Field, NonNegativeInt, ValidationInfo, field_validator

from schemas.base import IdStr, InputModel, ORMModel, reject_null


def _check_salary_range(value, info: ValidationInfo):
    minimum = info.data.get("min_salary")
    if value is not None and minimum is not None and value < minimum:
        raise ValueError("Maximum salary must be greater than or equal to minimum salary")
    return value


class CreatePositionInput(InputModel):
    client_id: IdStr
    account_manager_id: IdStr
    title: str = Field(min_length=1)
    details: Optional[str] = None
    job_ad: Optional[str] = None
    min_salary: Optional[NonNegativeInt] = None
    max_salary: Optional[NonNegativeInt] = None
    cultural_fit_criteria: Optional[str] = None
    tech_stacks: Optional[List[str]] = None

    @field_validator("max_salary")
    @classmethod
    def max_salary_not_below_min(cls, value, info: ValidationInfo):
        return _check_salary_range(value, info)


class UpdatePositionInput(InputModel):
    client_id: Optional[IdStr] = None
    account_manager_id: Optional[IdStr] = None
    title: Optional[str] = Field(default=None, min_length=1)
    details: Optional[str] = None
    job_ad: Optional[str] = None
    min_salary: Optional[NonNegativeInt] = None
    max_salary: Optional[NonNegativeInt] = None
    cultural_fit_criteria: Optional[str] = None
    # None/absent keeps the current links, [] clears them
    tech_stacks: Optional[List[str]] = None

    @field_validator("client_id", "account_manager_id", "title")
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)

    @field_validator("max_salary")
    @classmethod
    def max_salary_not_below_min(cls, value, info: ValidationInfo):
        return _check_salary_range(value, info)


class TechStackOut(ORMModel):
    id: str
    name: str


class PositionOut(ORMModel):
    id: str
    client_id: str
    account_manager_id: str
    title: str
    details: Optional[str] = None
    job_ad: Optional[str] = None
    min_salary: Optional[int] = None
    max_salary: Optional[int] = None
    cultural_fit_criteria: Optional[str] = None
    created_at: datetime
    tech_stacks: List[TechStackOut] = []
