# models/candidate/resolver.py

from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from models.candidate import repository
from models.candidate.model import Candidate
from utils.logger import AppLogger

logger = AppLogger.get_logger(__name__)


async def resolve_candidate(
    db: AsyncSession,
    email: str,
    name: str,
    resume_link: Optional[str] = None,
) -> Tuple[Candidate, bool]:
    """Find the candidate with this exact email or create one.

    Returns ``(candidate, created)``. An existing candidate is returned
    untouched: the first application decides name and resume link.

    Must run inside the caller's transaction. Two requests for the same new
    email can both miss the lookup; the unique email constraint rejects the
    second insert.
    """
    candidate = await repository.get_candidate_by_email(db, email)
    if candidate is not None:
        logger.debug(f"Reusing candidate {candidate.id} for {email}")
        return candidate, False

    candidate = await repository.insert_candidate(db, name=name, email=email, resume_link=resume_link)
    logger.info(f"Candidate created: {email}")
    return candidate, True
