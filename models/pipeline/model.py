from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint

from db.base import Base, new_id
from utils.constants import ID_LENGTH, NAME_LENGTH
from utils.dates_handler import utcnow


class InterviewStepType(Base):
    """Reusable, client-owned category of interview stage."""
    __tablename__ = "interview_step_types"
    __table_args__ = (
        UniqueConstraint("client_id", "name", name="uq_interview_step_type_client_name"),
    )

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    client_id = Column(String(ID_LENGTH), ForeignKey("clients.id"), nullable=False, index=True)
    name = Column(String(NAME_LENGTH), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class InterviewStep(Base):
    __tablename__ = "interview_steps"
    __table_args__ = (
        UniqueConstraint("position_id", "sequence_number", name="uq_interview_step_position_sequence"),
    )

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    position_id = Column(String(ID_LENGTH), ForeignKey("positions.id"), nullable=False, index=True)
    sequence_number = Column(Integer, nullable=False)
    name = Column(String(NAME_LENGTH), nullable=False)
    type_id = Column(String(ID_LENGTH), ForeignKey("interview_step_types.id"), nullable=False)
    original_assignment_id = Column(String(ID_LENGTH), ForeignKey("original_assignments.id"), nullable=True)
    scheduling_link = Column(String, nullable=True)
    email_template = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
