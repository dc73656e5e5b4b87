from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models.applications.model import CandidateApplication, InterviewEvent
from schemas.interview_event import build_event_details
from utils.constants import CandidateStatus, InterviewEventName


async def find_application(
    db: AsyncSession,
    candidate_id: str,
    position_id: str,
) -> Optional[CandidateApplication]:
    result = await db.execute(
        select(CandidateApplication).where(
            CandidateApplication.candidate_id == candidate_id,
            CandidateApplication.position_id == position_id,
        )
    )
    return result.scalars().first()


async def get_application(db: AsyncSession, application_id: str) -> Optional[CandidateApplication]:
    return await db.get(CandidateApplication, application_id, populate_existing=True)


async def get_application_detail(db: AsyncSession, application_id: str) -> Optional[CandidateApplication]:
    result = await db.execute(
        select(CandidateApplication)
        .where(CandidateApplication.id == application_id)
        .options(
            selectinload(CandidateApplication.candidate),
            selectinload(CandidateApplication.interview_events),
        )
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def list_applications_for_position(db: AsyncSession, position_id: str) -> List[CandidateApplication]:
    result = await db.execute(
        select(CandidateApplication)
        .where(CandidateApplication.position_id == position_id)
        .options(selectinload(CandidateApplication.candidate))
        .order_by(CandidateApplication.created_at.desc())
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def insert_application(
    db: AsyncSession,
    candidate_id: str,
    position_id: str,
) -> CandidateApplication:
    application = CandidateApplication(
        candidate_id=candidate_id,
        position_id=position_id,
        status=CandidateStatus.INITIAL_STATE,
    )
    db.add(application)
    await db.flush()
    return application


async def add_event(
    db: AsyncSession,
    application_id: str,
    event_name: InterviewEventName,
    **details: Any,
) -> InterviewEvent:
    """Append an audit event; ``details`` must match the shape ``event_name`` requires."""
    payload: Dict[str, Any] = build_event_details(event_name, **details)
    event = InterviewEvent(
        candidate_application_id=application_id,
        event_name=event_name.value,
        details=payload,
    )
    db.add(event)
    await db.flush()
    return event


async def delete_events_for_application(db: AsyncSession, application_id: str) -> int:
    result = await db.execute(
        delete(InterviewEvent).where(InterviewEvent.candidate_application_id == application_id)
    )
    return result.rowcount or 0

