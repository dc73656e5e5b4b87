# Interview execution records. Scheduling, recording and scoring happen in
# other services; only the rows and their references live here.
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from db.base import Base, new_id
from utils.constants import ID_LENGTH
from utils.dates_handler import utcnow


class InterviewAssignment(Base):
    __tablename__ = "interview_assignments"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    candidate_application_id = Column(
        String(ID_LENGTH), ForeignKey("candidate_applications.id"), nullable=False, index=True
    )
    interview_step_id = Column(String(ID_LENGTH), ForeignKey("interview_steps.id"), nullable=False)
    interviewer_id = Column(String(ID_LENGTH), ForeignKey("interviewers.id"), nullable=False)
    scheduled_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Evaluation(Base):
    __tablename__ = "evaluations"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    interview_assignment_id = Column(
        String(ID_LENGTH), ForeignKey("interview_assignments.id"), nullable=False, index=True
    )
    score = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Transcription(Base):
    __tablename__ = "transcriptions"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    interview_assignment_id = Column(
        String(ID_LENGTH), ForeignKey("interview_assignments.id"), nullable=False, index=True
    )
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
