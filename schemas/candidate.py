from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from schemas.base import EmailStr, IdStr, InputModel, ORMModel, UrlStr, reject_null
from schemas.interview_event import InterviewEventOut
from utils.constants import CandidateStatus


# ==================================
# INPUT
# ==================================
class CandidateInput(InputModel):
    name: str = Field(min_length=1)
    email: EmailStr
    resume_link: Optional[UrlStr] = None


class CreateCandidateApplicationInput(InputModel):
    position_id: IdStr
    candidate: CandidateInput


class UpdateCandidateApplicationInput(InputModel):
    # Absent fields stay untouched; explicit None clears the nullable ones
    status: Optional[CandidateStatus] = None
    client_notified_at: Optional[datetime] = None
    current_interview_step_id: Optional[IdStr] = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, value):
        return reject_null(value)


# ==================================
# OUTPUT
# ==================================
class CandidateOut(ORMModel):
    id: str
    name: str
    email: str
    resume_link: Optional[str] = None
    created_at: datetime


class CandidateApplicationOut(ORMModel):
    id: str
    candidate_id: str
    position_id: str
    status: CandidateStatus
    status_updated_at: datetime
    client_notified_at: Optional[datetime] = None
    current_interview_step_id: Optional[str] = None
    created_at: datetime


class CandidateApplicationWithCandidate(CandidateApplicationOut):
    candidate: CandidateOut


class CandidateApplicationDetail(CandidateApplicationWithCandidate):
    interview_events: List[InterviewEventOut] = []
