from sqlalchemy import Column, DateTime, ForeignKey, String, Text

from db.base import Base, new_id
from utils.constants import ID_LENGTH, NAME_LENGTH
from utils.dates_handler import utcnow


class AccountManager(Base):
    __tablename__ = "account_managers"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(String(NAME_LENGTH), nullable=False)
    email = Column(String(NAME_LENGTH), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class Client(Base):
    __tablename__ = "clients"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(String(NAME_LENGTH), nullable=False)
    contact_info = Column(Text, nullable=True)
    account_manager_id = Column(String(ID_LENGTH), ForeignKey("account_managers.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class OriginalAssignment(Base):
    """Take-home assignment a pipeline step can hand out."""
    __tablename__ = "original_assignments"

    id = Column(String(ID_LENGTH), primary_key=True, default=new_id)
    name = Column(String(NAME_LENGTH), nullable=False)
    original_link = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
