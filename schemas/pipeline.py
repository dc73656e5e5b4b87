from datetime import datetime
from typing import Optional

from pydantic import Field, PositiveInt, field_validator

from schemas.base import IdStr, InputModel, ORMModel, UrlStr, reject_null


# ==================================
# INTERVIEW STEP TYPES
# ==================================
class CreateInterviewStepTypeInput(InputModel):
    name: str = Field(min_length=1)
    client_id: IdStr


class UpdateInterviewStepTypeInput(InputModel):
    # Ownership is fixed at creation; only the name can change
    name: Optional[str] = Field(default=None, min_length=1)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        return reject_null(value)


class InterviewStepTypeOut(ORMModel):
    id: str
    client_id: str
    name: str
    created_at: datetime


# ==================================
# INTERVIEW STEPS
# ==================================
class CreateInterviewStepInput(InputModel):
    position_id: IdStr
    sequence_number: PositiveInt
    name: str = Field(min_length=1)
    type_id: IdStr
    original_assignment_id: Optional[IdStr] = None
    scheduling_link: Optional[UrlStr] = None
    email_template: Optional[str] = None


class UpdateInterviewStepInput(InputModel):
    sequence_number: Optional[PositiveInt] = None
    name: Optional[str] = Field(default=None, min_length=1)
    type_id: Optional[IdStr] = None
    original_assignment_id: Optional[IdStr] = None
    scheduling_link: Optional[UrlStr] = None
    email_template: Optional[str] = None

    @field_validator("sequence_number", "name", "type_id")
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class InterviewStepOut(ORMModel):
    id: str
    position_id: str
    sequence_number: int
    name: str
    type_id: str
    original_assignment_id: Optional[str] = None
    scheduling_link: Optional[str] = None
    email_template: Optional[str] = None
    created_at: datetime
