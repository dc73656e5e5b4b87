# models/pipeline/step_types.py
#
# Interview step types belong to one client. Every lookup matches on both
# the type id and the client id, so a type owned by another client behaves
# exactly like one that does not exist.

from sqlalchemy.ext.asyncio import AsyncSession

from models.pipeline import repository
from models.pipeline.model import InterviewStepType
from schemas.base import parse_input
from schemas.pipeline import CreateInterviewStepTypeInput, InterviewStepTypeOut, UpdateInterviewStepTypeInput
from utils.actions import server_action
from utils.errors import NotFoundError
from utils.logger import AppLogger
from utils.revalidation import Revalidator, revalidate_path, step_types_path

logger = AppLogger.get_logger(__name__)

STEP_TYPE_NOT_FOUND = "Interview step type not found"
DUPLICATE_STEP_TYPE = "An interview step type with this name already exists for this client"


@server_action(
    "Failed to create interview step type",
    unique=DUPLICATE_STEP_TYPE,
    foreign_key="Client not found",
)
async def create_interview_step_type(db: AsyncSession, data, revalidate: Revalidator = revalidate_path):
    payload = parse_input(CreateInterviewStepTypeInput, data)

    async with db.begin():
        step_type = InterviewStepType(**payload.model_dump())
        db.add(step_type)
        await db.flush()
        result = InterviewStepTypeOut.model_validate(step_type)

    logger.info(f"Interview step type '{result.name}' created for client {result.client_id}")
    revalidate(step_types_path(result.client_id))
    return result


@server_action("Failed to fetch interview step types")
async def get_interview_step_types(db: AsyncSession, client_id: str):
    async with db.begin():
        step_types = await repository.list_step_types(db, client_id)
        return [InterviewStepTypeOut.model_validate(st) for st in step_types]


@server_action("Failed to fetch interview step type")
async def get_interview_step_type(db: AsyncSession, step_type_id: str, client_id: str):
    async with db.begin():
        step_type = await repository.get_step_type_for_client(db, step_type_id, client_id)
        if step_type is None:
            raise NotFoundError(STEP_TYPE_NOT_FOUND)
        return InterviewStepTypeOut.model_validate(step_type)


@server_action("Failed to update interview step type", unique=DUPLICATE_STEP_TYPE)
async def update_interview_step_type(
    db: AsyncSession,
    step_type_id: str,
    client_id: str,
    data,
    revalidate: Revalidator = revalidate_path,
):
    payload = parse_input(UpdateInterviewStepTypeInput, data)
    changes = payload.model_dump(exclude_unset=True)

    async with db.begin():
        step_type = await repository.get_step_type_for_client(db, step_type_id, client_id)
        if step_type is None:
            raise NotFoundError(STEP_TYPE_NOT_FOUND)

        # Nothing to change: hand back the stored row
        if not changes:
            return InterviewStepTypeOut.model_validate(step_type)

        for field, value in changes.items():
            setattr(step_type, field, value)
        await db.flush()
        result = InterviewStepTypeOut.model_validate(step_type)

    revalidate(step_types_path(client_id))
    return result


@server_action(
    "Failed to delete interview step type",
    foreign_key="Interview step type is still used by interview steps",
)
async def delete_interview_step_type(
    db: AsyncSession,
    step_type_id: str,
    client_id: str,
    revalidate: Revalidator = revalidate_path,
):
    async with db.begin():
        step_type = await repository.get_step_type_for_client(db, step_type_id, client_id)
        if step_type is None:
            raise NotFoundError(STEP_TYPE_NOT_FOUND)
        await db.delete(step_type)
        await db.flush()

    logger.info(f"Interview step type {step_type_id} deleted for client {client_id}")
    revalidate(step_types_path(client_id))
    return None
