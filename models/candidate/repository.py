from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.candidate.model import Candidate


async def get_candidate_by_email(db: AsyncSession, email: str) -> Optional[Candidate]:
    result = await db.execute(select(Candidate).where(Candidate.email == email))
    return result.scalars().first()


async def insert_candidate(
    db: AsyncSession,
    name: str,
    email: str,
    resume_link: Optional[str] = None,
) -> Candidate:
    candidate = Candidate(name=name, email=email, resume_link=resume_link)
    db.add(candidate)
    await db.flush()
    return candidate
