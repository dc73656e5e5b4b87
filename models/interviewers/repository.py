from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.interviewers.model import Interviewer


async def get_interviewer_with_tech_stacks(db: AsyncSession, interviewer_id: str) -> Optional[Interviewer]:
    result = await db.execute(
        select(Interviewer)
        .where(Interviewer.id == interviewer_id)
        .options(selectinload(Interviewer.tech_stacks))
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def list_interviewers(db: AsyncSession) -> List[Interviewer]:
    result = await db.execute(
        select(Interviewer)
        .options(selectinload(Interviewer.tech_stacks))
        .order_by(Interviewer.name)
    )
    return list(result.scalars().all())
