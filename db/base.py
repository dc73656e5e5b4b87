import uuid

from sqlalchemy.orm import declarative_base

# One metadata for every table so foreign keys resolve across model modules
Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())
