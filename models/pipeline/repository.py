from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.pipeline.model import InterviewStep, InterviewStepType
from models.positions.model import Position


async def get_step_type_for_client(
    db: AsyncSession,
    step_type_id: str,
    client_id: str,
) -> Optional[InterviewStepType]:
    """Match on id AND owning client; another client's type reads as missing."""
    result = await db.execute(
        select(InterviewStepType).where(
            InterviewStepType.id == step_type_id,
            InterviewStepType.client_id == client_id,
        )
    )
    return result.scalars().first()


async def list_step_types(db: AsyncSession, client_id: str) -> List[InterviewStepType]:
    result = await db.execute(
        select(InterviewStepType)
        .where(InterviewStepType.client_id == client_id)
        .order_by(InterviewStepType.name)
    )
    return list(result.scalars().all())


async def get_position(db: AsyncSession, position_id: str) -> Optional[Position]:
    return await db.get(Position, position_id)


async def get_step(db: AsyncSession, step_id: str) -> Optional[InterviewStep]:
    return await db.get(InterviewStep, step_id, populate_existing=True)


async def list_steps_for_position(db: AsyncSession, position_id: str) -> List[InterviewStep]:
    result = await db.execute(
        select(InterviewStep)
        .where(InterviewStep.position_id == position_id)
        .order_by(InterviewStep.sequence_number)
    )
    return list(result.scalars().all())
