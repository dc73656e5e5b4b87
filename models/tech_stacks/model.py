from sqlalchemy import Column, ForeignKey, String

from db.base import Base, new_id
from utils.constants import ID_LENGTH, NAME_LENGTH


class TechStack(Base):
    __tablename__ = "tech_stacks"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    # Always stored lower-cased
    name = Column(String(NAME_LENGTH), nullable=False, unique=True)


class PositionTechStack(Base):
    __tablename__ = "position_tech_stacks"

    position_id = Column(String(ID_LENGTH), ForeignKey("positions.id"), primary_key=True)
    tech_stack_id = Column(String(ID_LENGTH), ForeignKey("tech_stacks.id"), primary_key=True)


class InterviewerTechStack(Base):
    __tablename__ = "interviewer_tech_stacks"

    interviewer_id = Column(String(ID_LENGTH), ForeignKey("interviewers.id"), primary_key=True)
    tech_stack_id = Column(String(ID_LENGTH), ForeignKey("tech_stacks.id"), primary_key=True)
