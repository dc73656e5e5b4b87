# Importing this module registers every table on Base.metadata.
from models.applications.model import CandidateApplication, InterviewEvent
from models.candidate.model import Candidate
from models.clients.model import AccountManager, Client, OriginalAssignment
from models.interviewers.model import Interviewer
from models.interviews.model import Evaluation, InterviewAssignment, Transcription
from models.pipeline.model import InterviewStep, InterviewStepType
from models.positions.model import Position
from models.tech_stacks.model import InterviewerTechStack, PositionTechStack, TechStack

__all__ = [
    "AccountManager",
    "Candidate",
    "CandidateApplication",
    "Client",
    "Evaluation",
    "InterviewAssignment",
    "InterviewEvent",
    "InterviewStep",
    "InterviewStepType",
    "Interviewer",
    "InterviewerTechStack",
    "OriginalAssignment",
    "Position",
    "PositionTechStack",
    "TechStack",
    "Transcription",
]
