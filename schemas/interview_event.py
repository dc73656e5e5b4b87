from datetime import datetime
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from schemas.base import ORMModel
from utils.constants import CandidateStatus, InterviewEventName


class CandidateAppliedDetails(BaseModel):
    event_name: Literal[InterviewEventName.CANDIDATE_APPLIED]
    notes: str


class StatusChangedDetails(BaseModel):
    event_name: Literal[InterviewEventName.STATUS_CHANGED]
    notes: str
    old_status: CandidateStatus = Field(serialization_alias="oldStatus")
    new_status: CandidateStatus = Field(serialization_alias="newStatus")


InterviewEventDetails = Annotated[
    Union[CandidateAppliedDetails, StatusChangedDetails],
    Field(discriminator="event_name"),
]

_EVENT_DETAILS = TypeAdapter(InterviewEventDetails)


def build_event_details(event_name: InterviewEventName, **details: Any) -> Dict[str, Any]:
    """Validate an event payload against the shape its name requires.

    Returns the JSON-ready dict stored in ``interview_events.details``; the
    event name itself lives in its own column.
    """
    payload = _EVENT_DETAILS.validate_python({"event_name": event_name, **details})
    return payload.model_dump(mode="json", by_alias=True, exclude={"event_name"})


class InterviewEventOut(ORMModel):
    id: str
    candidate_application_id: str
    event_name: str
    details: Optional[Dict[str, Any]] = None
    created_at: datetime
