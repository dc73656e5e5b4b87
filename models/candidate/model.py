from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from db.base import Base, new_id
from utils.constants import ID_LENGTH, NAME_LENGTH
from utils.dates_handler import utcnow


class Candidate(Base):
    __tablename__ = "candidates"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(String(NAME_LENGTH), nullable=False)
    # Compared exactly as stored, no case folding
    email = Column(String(NAME_LENGTH), nullable=False, unique=True)
    resume_link = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    applications = relationship("CandidateApplication", back_populates="candidate")
