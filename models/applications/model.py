from sqlalchemy import JSON, Column, DateTime, Enum, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from db.base import Base, new_id
from utils.constants import ID_LENGTH, NAME_LENGTH, STATUS_LENGTH, CandidateStatus
from utils.dates_handler import utcnow

candidate_status_enum = Enum(
    CandidateStatus,
    name="candidate_status",
    values_callable=lambda statuses: [s.value for s in statuses],
    native_enum=False,
    length=STATUS_LENGTH,
    validate_strings=True,
)


class CandidateApplication(Base):
    __tablename__ = "candidate_applications"
    __table_args__ = (
        UniqueConstraint("candidate_id", "position_id", name="uq_candidate_application_position"),
    )

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    candidate_id = Column(String(ID_LENGTH), ForeignKey("candidates.id"), nullable=False, index=True)
    position_id = Column(String(ID_LENGTH), ForeignKey("positions.id"), nullable=False, index=True)
    status = Column(candidate_status_enum, nullable=False, default=CandidateStatus.INITIAL_STATE)
    status_updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    client_notified_at = Column(DateTime(timezone=True), nullable=True)
    current_interview_step_id = Column(String(ID_LENGTH), ForeignKey("interview_steps.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    candidate = relationship("Candidate", back_populates="applications")
    # No DB cascade: events are removed explicitly before the application
    interview_events = relationship(
        "InterviewEvent",
        back_populates="application",
        order_by=lambda: InterviewEvent.created_at.desc(),
        passive_deletes="all",
    )


class InterviewEvent(Base):
    """Append-only audit record of something that happened to an application."""
    __tablename__ = "interview_events"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    candidate_application_id = Column(
        String(ID_LENGTH), ForeignKey("candidate_applications.id"), nullable=False, index=True
    )
    event_name = Column(String(NAME_LENGTH), nullable=False)
    details = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    application = relationship("CandidateApplication", back_populates="interview_events")
