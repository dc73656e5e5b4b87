# models/applications/lifecycle.py
#
# Candidate application lifecycle: creation with candidate de-duplication,
# audited status changes and deletion with explicit event cleanup.
# Status transitions are unrestricted; only their occurrence is recorded.

from sqlalchemy.ext.asyncio import AsyncSession

from models.applications import repository
from models.candidate.resolver import resolve_candidate
from schemas.base import parse_input
from schemas.candidate import (
    CandidateApplicationDetail,
    CandidateApplicationOut,
    CandidateApplicationWithCandidate,
    CreateCandidateApplicationInput,
    UpdateCandidateApplicationInput,
)
from utils.actions import server_action
from utils.constants import InterviewEventName
from utils.dates_handler import utcnow
from utils.errors import DuplicateApplicationError, NotFoundError
from utils.logger import AppLogger
from utils.revalidation import Revalidator, position_path, revalidate_path

logger = AppLogger.get_logger(__name__)

APPLICATION_NOT_FOUND = "Candidate application not found"
APPLIED_NOTE = "Application received for position."


@server_action(
    "Failed to create candidate application",
    unique="This candidate or application was created by a concurrent request. Please retry.",
    foreign_key="Position not found",
)
async def create_candidate_application(
    db: AsyncSession,
    data,
    revalidate: Revalidator = revalidate_path,
) -> CandidateApplicationOut:
    payload = parse_input(CreateCandidateApplicationInput, data)
    applicant = payload.candidate

    async with db.begin():
        candidate, created = await resolve_candidate(
            db,
            email=applicant.email,
            name=applicant.name,
            resume_link=applicant.resume_link,
        )

        # A brand-new candidate cannot have applied anywhere yet
        if not created:
            existing = await repository.find_application(db, candidate.id, payload.position_id)
            if existing is not None:
                raise DuplicateApplicationError()

        application = await repository.insert_application(db, candidate.id, payload.position_id)
        await repository.add_event(
            db,
            application.id,
            InterviewEventName.CANDIDATE_APPLIED,
            notes=APPLIED_NOTE,
        )
        result = CandidateApplicationOut.model_validate(application)

    logger.info(f"Application {result.id} created for candidate {candidate.email} on position {result.position_id}")
    revalidate(position_path(result.position_id))
    return result


@server_action("Failed to fetch candidate application")
async def get_candidate_application(db: AsyncSession, application_id: str) -> CandidateApplicationDetail:
    """Application with its candidate and events, newest event first."""
    async with db.begin():
        application = await repository.get_application_detail(db, application_id)
        if application is None:
            raise NotFoundError(APPLICATION_NOT_FOUND)
        return CandidateApplicationDetail.model_validate(application)


@server_action("Failed to fetch candidate applications for position")
async def get_candidate_applications_for_position(db: AsyncSession, position_id: str):
    async with db.begin():
        applications = await repository.list_applications_for_position(db, position_id)
        return [CandidateApplicationWithCandidate.model_validate(app) for app in applications]


@server_action(
    "Failed to update candidate application",
    foreign_key="Interview step not found",
)
async def update_candidate_application(
    db: AsyncSession,
    application_id: str,
    data,
    revalidate: Revalidator = revalidate_path,
) -> CandidateApplicationOut:
    """Apply a partial update.

    A status different from the stored one re-stamps ``status_updated_at``
    and writes a STATUS_CHANGED event in the same transaction. Sending the
    current status again changes nothing.
    """
    payload = parse_input(UpdateCandidateApplicationInput, data)
    changes = payload.model_dump(exclude_unset=True)

    async with db.begin():
        application = await repository.get_application(db, application_id)
        if application is None:
            raise NotFoundError(APPLICATION_NOT_FOUND)

        new_status = changes.get("status")
        if new_status is not None and new_status != application.status:
            old_status = application.status
            changes["status_updated_at"] = utcnow()
            await repository.add_event(
                db,
                application.id,
                InterviewEventName.STATUS_CHANGED,
                notes=f"Status changed from {old_status.value} to {new_status.value}.",
                old_status=old_status,
                new_status=new_status,
            )
            logger.info(f"Application {application.id}: {old_status.value} -> {new_status.value}")
        else:
            changes.pop("status", None)

        for field, value in changes.items():
            setattr(application, field, value)
        await db.flush()
        result = CandidateApplicationOut.model_validate(application)

    revalidate(position_path(result.position_id))
    return result


@server_action(
    "Failed to delete candidate application",
    foreign_key="Candidate application is still referenced by interview assignments",
)
async def delete_candidate_application(
    db: AsyncSession,
    application_id: str,
    revalidate: Revalidator = revalidate_path,
) -> CandidateApplicationOut:
    """Delete the application's events, then the application.

    The event delete always runs first; when the application turns out not
    to exist the whole transaction, event delete included, is rolled back.
    The candidate row is kept.
    """
    async with db.begin():
        removed = await repository.delete_events_for_application(db, application_id)

        application = await repository.get_application(db, application_id)
        if application is None:
            raise NotFoundError(APPLICATION_NOT_FOUND)

        result = CandidateApplicationOut.model_validate(application)
        await db.delete(application)
        await db.flush()

    logger.info(f"Application {result.id} deleted with {removed} events")
    revalidate(position_path(result.position_id))
    return result
