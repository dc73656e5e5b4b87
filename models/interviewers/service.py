# models/interviewers/service.py

from sqlalchemy.ext.asyncio import AsyncSession

from models.interviewers import repository
from models.interviewers.model import Interviewer
from models.tech_stacks.reconciler import INTERVIEWER_TECH_STACKS, clear_tags, reconcile_tags
from schemas.base import parse_input
from schemas.interviewer import CreateInterviewerInput, InterviewerOut, UpdateInterviewerInput
from utils.actions import server_action
from utils.errors import NotFoundError
from utils.logger import AppLogger
from utils.revalidation import Revalidator, revalidate_path

logger = AppLogger.get_logger(__name__)

INTERVIEWER_NOT_FOUND = "Interviewer not found"
DUPLICATE_EMAIL = "An interviewer with this email already exists"


@server_action("Failed to create interviewer", unique=DUPLICATE_EMAIL)
async def create_interviewer(db: AsyncSession, data, revalidate: Revalidator = revalidate_path):
    payload = parse_input(CreateInterviewerInput, data)

    async with db.begin():
        interviewer = Interviewer(**payload.model_dump(exclude={"tech_stacks"}))
        db.add(interviewer)
        await db.flush()
        await reconcile_tags(db, payload.tech_stacks, interviewer.id, INTERVIEWER_TECH_STACKS)

        interviewer = await repository.get_interviewer_with_tech_stacks(db, interviewer.id)
        result = InterviewerOut.model_validate(interviewer)

    logger.info(f"Interviewer created: {result.email}")
    revalidate("/interviewers")
    return result


@server_action("Failed to fetch interviewer")
async def get_interviewer(db: AsyncSession, interviewer_id: str):
    async with db.begin():
        interviewer = await repository.get_interviewer_with_tech_stacks(db, interviewer_id)
        if interviewer is None:
            raise NotFoundError(INTERVIEWER_NOT_FOUND)
        return InterviewerOut.model_validate(interviewer)


@server_action("Failed to fetch interviewers")
async def get_interviewers(db: AsyncSession):
    async with db.begin():
        interviewers = await repository.list_interviewers(db)
        return [InterviewerOut.model_validate(interviewer) for interviewer in interviewers]


@server_action("Failed to update interviewer", unique=DUPLICATE_EMAIL)
async def update_interviewer(
    db: AsyncSession,
    interviewer_id: str,
    data,
    revalidate: Revalidator = revalidate_path,
):
    payload = parse_input(UpdateInterviewerInput, data)
    changes = payload.model_dump(exclude_unset=True)
    tech_stacks = changes.pop("tech_stacks", None)

    async with db.begin():
        interviewer = await db.get(Interviewer, interviewer_id)
        if interviewer is None:
            raise NotFoundError(INTERVIEWER_NOT_FOUND)

        for field, value in changes.items():
            setattr(interviewer, field, value)
        await db.flush()

        if tech_stacks is not None:
            await reconcile_tags(db, tech_stacks, interviewer_id, INTERVIEWER_TECH_STACKS, replace=True)

        interviewer = await repository.get_interviewer_with_tech_stacks(db, interviewer_id)
        result = InterviewerOut.model_validate(interviewer)

    revalidate("/interviewers")
    revalidate(f"/interviewers/{interviewer_id}")
    return result


@server_action(
    "Failed to delete interviewer",
    foreign_key="Interviewer still has interview assignments",
)
async def delete_interviewer(db: AsyncSession, interviewer_id: str, revalidate: Revalidator = revalidate_path):
    async with db.begin():
        interviewer = await repository.get_interviewer_with_tech_stacks(db, interviewer_id)
        if interviewer is None:
            raise NotFoundError(INTERVIEWER_NOT_FOUND)

        result = InterviewerOut.model_validate(interviewer)
        await clear_tags(db, interviewer_id, INTERVIEWER_TECH_STACKS)
        await db.delete(interviewer)
        await db.flush()

    logger.info(f"Interviewer {interviewer_id} deleted")
    revalidate("/interviewers")
    return result
