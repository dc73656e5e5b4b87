# models/pipeline/steps.py

from sqlalchemy.ext.asyncio import AsyncSession

from models.pipeline import repository
from models.pipeline.model import InterviewStep
from models.positions.model import Position
from schemas.base import parse_input
from schemas.pipeline import CreateInterviewStepInput, InterviewStepOut, UpdateInterviewStepInput
from utils.actions import server_action
from utils.errors import NotFoundError
from utils.logger import AppLogger
from utils.revalidation import Revalidator, position_path, revalidate_path

logger = AppLogger.get_logger(__name__)

STEP_NOT_FOUND = "Interview step not found"
POSITION_NOT_FOUND = "Position not found"
DUPLICATE_SEQUENCE = "An interview step with this sequence number already exists for this position"


async def _require_type_for_position(db: AsyncSession, type_id: str, position: Position) -> None:
    step_type = await repository.get_step_type_for_client(db, type_id, position.client_id)
    if step_type is None:
        raise NotFoundError("Interview step type not found for this client")


@server_action(
    "Failed to create interview step",
    unique=DUPLICATE_SEQUENCE,
    foreign_key="Original assignment not found",
)
async def create_interview_step(db: AsyncSession, data, revalidate: Revalidator = revalidate_path):
    """Add a step to a position's pipeline.

    Sequence numbers are taken as given: gaps are allowed and other steps
    are never renumbered.
    """
    payload = parse_input(CreateInterviewStepInput, data)

    async with db.begin():
        position = await repository.get_position(db, payload.position_id)
        if position is None:
            raise NotFoundError(POSITION_NOT_FOUND)
        await _require_type_for_position(db, payload.type_id, position)

        step = InterviewStep(**payload.model_dump())
        db.add(step)
        await db.flush()
        result = InterviewStepOut.model_validate(step)

    logger.info(f"Interview step #{result.sequence_number} '{result.name}' added to position {result.position_id}")
    revalidate(position_path(result.position_id))
    return result


@server_action("Failed to fetch interview step")
async def get_interview_step(db: AsyncSession, step_id: str):
    async with db.begin():
        step = await repository.get_step(db, step_id)
        if step is None:
            raise NotFoundError(STEP_NOT_FOUND)
        return InterviewStepOut.model_validate(step)


@server_action("Failed to fetch interview steps")
async def get_interview_steps_for_position(db: AsyncSession, position_id: str):
    async with db.begin():
        steps = await repository.list_steps_for_position(db, position_id)
        return [InterviewStepOut.model_validate(step) for step in steps]


@server_action(
    "Failed to update interview step",
    unique=DUPLICATE_SEQUENCE,
    foreign_key="Original assignment not found",
)
async def update_interview_step(
    db: AsyncSession,
    step_id: str,
    data,
    revalidate: Revalidator = revalidate_path,
):
    payload = parse_input(UpdateInterviewStepInput, data)
    changes = payload.model_dump(exclude_unset=True)

    async with db.begin():
        step = await repository.get_step(db, step_id)
        if step is None:
            raise NotFoundError(STEP_NOT_FOUND)

        if changes.get("type_id"):
            position = await repository.get_position(db, step.position_id)
            if position is None:
                raise NotFoundError(POSITION_NOT_FOUND)
            await _require_type_for_position(db, changes["type_id"], position)

        for field, value in changes.items():
            setattr(step, field, value)
        await db.flush()
        result = InterviewStepOut.model_validate(step)

    revalidate(position_path(result.position_id))
    return result


@server_action(
    "Failed to delete interview step",
    foreign_key="Interview step is still referenced by applications or assignments",
)
async def delete_interview_step(db: AsyncSession, step_id: str, revalidate: Revalidator = revalidate_path):
    async with db.begin():
        step = await repository.get_step(db, step_id)
        if step is None:
            raise NotFoundError(STEP_NOT_FOUND)

        result = InterviewStepOut.model_validate(step)
        await db.delete(step)
        await db.flush()

    logger.info(f"Interview step {step_id} removed from position {result.position_id}")
    revalidate(position_path(result.position_id))
    return result
