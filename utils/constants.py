# utils/constants.py

from enum import Enum


class CandidateStatus(str, Enum):
    """Where an application sits in the client's pipeline.

    Transitions are free: any status may follow any other.
    """
    INITIAL_STATE = "Initial state"
    INVITATION_SENT = "Invitation Sent"
    INTERVIEW_SCHEDULED = "Interview Scheduled"
    WAITING_FOR_EVALUATION = "Waiting for evaluation"
    NEEDS_ADDITIONAL_REVIEW = "Needs additional review"
    NEEDS_FINAL_REPORT = "Needs final report"
    FINAL_REPORT_SENT = "Final report sent"
    PASSED = "Passed"
    NEEDS_TO_BE_REINTERVIEWED = "Needs to be re-interviewed"
    HOLD = "Hold"
    REJECTED = "Rejected"
    ARCHIVED = "Archived"


class InterviewEventName(str, Enum):
    CANDIDATE_APPLIED = "CANDIDATE_APPLIED"
    STATUS_CHANGED = "STATUS_CHANGED"


# Column sizes shared by models and schemas
ID_LENGTH = 36
NAME_LENGTH = 255
STATUS_LENGTH = 50
