from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from schemas.base import EmailStr, InputModel, ORMModel, reject_null
from schemas.position import TechStackOut


class CreateInterviewerInput(InputModel):
    name: str = Field(min_length=1)
    email: EmailStr
    scheduling_tool_identifier: Optional[str] = None
    tech_stacks: Optional[List[str]] = None


class UpdateInterviewerInput(InputModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    scheduling_tool_identifier: Optional[str] = None
    is_active: Optional[bool] = None
    tech_stacks: Optional[List[str]] = None

    @field_validator("name", "email", "is_active")
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class InterviewerOut(ORMModel):
    id: str
    name: str
    email: str
    scheduling_tool_identifier: Optional[str] = None
    is_active: bool
    created_at: datetime
    tech_stacks: List[TechStackOut] = []
