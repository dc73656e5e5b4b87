from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.orm import relationship

from db.base import Base, new_id
from utils.constants import ID_LENGTH, NAME_LENGTH
from utils.dates_handler import utcnow


class Interviewer(Base):
    __tablename__ = "interviewers"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(String(NAME_LENGTH), nullable=False)
    email = Column(String(NAME_LENGTH), nullable=False, unique=True)
    scheduling_tool_identifier = Column(String(NAME_LENGTH), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    tech_stacks = relationship(
        "TechStack",
        secondary="interviewer_tech_stacks",
        order_by="TechStack.name",
        viewonly=True,
    )
