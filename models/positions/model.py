from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from db.base import Base, new_id
from utils.constants import ID_LENGTH, NAME_LENGTH
from utils.dates_handler import utcnow


class Position(Base):
    __tablename__ = "positions"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    client_id = Column(String(ID_LENGTH), ForeignKey("clients.id"), nullable=False, index=True)
    account_manager_id = Column(String(ID_LENGTH), ForeignKey("account_managers.id"), nullable=False)
    title = Column(String(NAME_LENGTH), nullable=False)
    details = Column(Text, nullable=True)
    job_ad = Column(Text, nullable=True)
    min_salary = Column(Integer, nullable=True)
    max_salary = Column(Integer, nullable=True)
    cultural_fit_criteria = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Links are written through the tag reconciler, never through this collection
    tech_stacks = relationship(
        "TechStack",
        secondary="position_tech_stacks",
        order_by="TechStack.name",
        viewonly=True,
    )
