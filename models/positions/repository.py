from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.pipeline.model import InterviewStep, InterviewStepType
from models.positions.model import Position


async def get_position_with_tech_stacks(db: AsyncSession, position_id: str) -> Optional[Position]:
    result = await db.execute(
        select(Position)
        .where(Position.id == position_id)
        .options(selectinload(Position.tech_stacks))
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def list_positions(db: AsyncSession) -> List[Position]:
    result = await db.execute(
        select(Position)
        .options(selectinload(Position.tech_stacks))
        .order_by(Position.created_at.desc())
    )
    return list(result.scalars().all())


async def has_steps_outside_client(db: AsyncSession, position_id: str, client_id: str) -> bool:
    """True when a step of the position uses a step type owned by a different client."""
    result = await db.execute(
        select(InterviewStep.id)
        .join(InterviewStepType, InterviewStep.type_id == InterviewStepType.id)
        .where(
            InterviewStep.position_id == position_id,
            InterviewStepType.client_id != client_id,
        )
        .limit(1)
    )
    return result.first() is not None
