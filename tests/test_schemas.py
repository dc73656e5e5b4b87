import pydantic
import pytest

from schemas.base import parse_input
from schemas.candidate import CreateCandidateApplicationInput, UpdateCandidateApplicationInput
from schemas.interview_event import build_event_details
from schemas.pipeline import UpdateInterviewStepTypeInput
from utils.constants import CandidateStatus, InterviewEventName
from utils.errors import ValidationError

POSITION_ID = "0b9c5a8e-3f4d-4e2a-9b1c-7d6e5f4a3b2c"


def test_input_accepts_camel_and_snake_case():
    camel = parse_input(CreateCandidateApplicationInput, {
        "positionId": POSITION_ID,
        "candidate": {"name": "  Jane Doe ", "email": "jane@example.com", "resumeLink": "https://example.com/cv"},
    })
    snake = parse_input(CreateCandidateApplicationInput, {
        "position_id": POSITION_ID,
        "candidate": {"name": "Jane Doe", "email": "jane@example.com", "resume_link": "https://example.com/cv"},
    })

    assert camel == snake
    assert camel.candidate.name == "Jane Doe"
    # urls come back exactly as sent
    assert camel.candidate.resume_link == "https://example.com/cv"


def test_parse_input_collects_all_issues():
    with pytest.raises(ValidationError) as excinfo:
        parse_input(CreateCandidateApplicationInput, {"candidate": {"email": "nope"}})

    paths = [issue["path"] for issue in excinfo.value.issues]
    assert ["positionId"] in paths
    assert ["candidate", "name"] in paths
    assert ["candidate", "email"] in paths


def test_partial_update_keeps_absent_fields_unset():
    update = parse_input(UpdateCandidateApplicationInput, {"clientNotifiedAt": None})

    assert update.model_dump(exclude_unset=True) == {"client_notified_at": None}


@pytest.mark.parametrize("schema, data", [
    (UpdateCandidateApplicationInput, {"status": None}),
    (UpdateInterviewStepTypeInput, {"name": None}),
])
def test_required_fields_cannot_be_nulled(schema, data):
    with pytest.raises(ValidationError):
        parse_input(schema, data)


def test_status_values_are_the_display_strings():
    update = parse_input(UpdateCandidateApplicationInput, {"status": "Needs final report"})

    assert update.status is CandidateStatus.NEEDS_FINAL_REPORT
    assert len(CandidateStatus) == 12


def test_status_changed_details_use_camel_case_keys():
    details = build_event_details(
        InterviewEventName.STATUS_CHANGED,
        notes="Status changed from Hold to Passed.",
        old_status=CandidateStatus.HOLD,
        new_status=CandidateStatus.PASSED,
    )

    assert details == {
        "notes": "Status changed from Hold to Passed.",
        "oldStatus": "Hold",
        "newStatus": "Passed",
    }


def test_event_details_must_match_the_event_name():
    with pytest.raises(pydantic.ValidationError):
        build_event_details(InterviewEventName.STATUS_CHANGED, notes="missing statuses")

    assert build_event_details(InterviewEventName.CANDIDATE_APPLIED, notes="hi") == {"notes": "hi"}


def test_email_is_kept_exactly_as_sent():
    parsed = parse_input(CreateCandidateApplicationInput, {
        "positionId": POSITION_ID,
        "candidate": {"name": "Jane Doe", "email": "Jane@Example.COM"},
    })

    assert parsed.candidate.email == "Jane@Example.COM"
