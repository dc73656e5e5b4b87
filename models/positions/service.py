# models/positions/service.py

from sqlalchemy.ext.asyncio import AsyncSession

from models.positions import repository
from models.positions.model import Position
from models.tech_stacks.reconciler import POSITION_TECH_STACKS, clear_tags, reconcile_tags
from schemas.base import parse_input
from schemas.position import CreatePositionInput, PositionOut, UpdatePositionInput
from utils.actions import server_action
from utils.errors import ActionError, NotFoundError
from utils.logger import AppLogger
from utils.revalidation import Revalidator, position_path, revalidate_path

logger = AppLogger.get_logger(__name__)

POSITION_NOT_FOUND = "Position not found"
CLIENT_CHANGE_BLOCKED = "Position has interview steps using another client's step types"


@server_action("Failed to create position", foreign_key="Client or account manager not found")
async def create_position(db: AsyncSession, data, revalidate: Revalidator = revalidate_path):
    payload = parse_input(CreatePositionInput, data)
    fields = payload.model_dump(exclude={"tech_stacks"})

    async with db.begin():
        position = Position(**fields)
        db.add(position)
        await db.flush()
        await reconcile_tags(db, payload.tech_stacks, position.id, POSITION_TECH_STACKS)

        position = await repository.get_position_with_tech_stacks(db, position.id)
        result = PositionOut.model_validate(position)

    logger.info(f"Position '{result.title}' created for client {result.client_id}")
    revalidate("/positions")
    return result


@server_action("Failed to fetch position")
async def get_position(db: AsyncSession, position_id: str):
    async with db.begin():
        position = await repository.get_position_with_tech_stacks(db, position_id)
        if position is None:
            raise NotFoundError(POSITION_NOT_FOUND)
        return PositionOut.model_validate(position)


@server_action("Failed to fetch positions")
async def get_positions(db: AsyncSession):
    async with db.begin():
        positions = await repository.list_positions(db)
        return [PositionOut.model_validate(position) for position in positions]


@server_action("Failed to update position", foreign_key="Client or account manager not found")
async def update_position(
    db: AsyncSession,
    position_id: str,
    data,
    revalidate: Revalidator = revalidate_path,
):
    """Partial update. ``tech_stacks`` replaces the whole set when present."""
    payload = parse_input(UpdatePositionInput, data)
    changes = payload.model_dump(exclude_unset=True)
    tech_stacks = changes.pop("tech_stacks", None)

    async with db.begin():
        position = await db.get(Position, position_id)
        if position is None:
            raise NotFoundError(POSITION_NOT_FOUND)

        new_client_id = changes.get("client_id")
        if new_client_id is not None and new_client_id != position.client_id:
            if await repository.has_steps_outside_client(db, position_id, new_client_id):
                raise ActionError(CLIENT_CHANGE_BLOCKED)

        for field, value in changes.items():
            setattr(position, field, value)
        await db.flush()

        if tech_stacks is not None:
            await reconcile_tags(db, tech_stacks, position_id, POSITION_TECH_STACKS, replace=True)

        position = await repository.get_position_with_tech_stacks(db, position_id)
        result = PositionOut.model_validate(position)

    revalidate("/positions")
    revalidate(position_path(position_id))
    return result


@server_action(
    "Failed to delete position",
    foreign_key="Position still has applications or interview steps",
)
async def delete_position(db: AsyncSession, position_id: str, revalidate: Revalidator = revalidate_path):
    async with db.begin():
        position = await repository.get_position_with_tech_stacks(db, position_id)
        if position is None:
            raise NotFoundError(POSITION_NOT_FOUND)

        result = PositionOut.model_validate(position)
        await clear_tags(db, position_id, POSITION_TECH_STACKS)
        await db.delete(position)
        await db.flush()

    logger.info(f"Position {position_id} deleted")
    revalidate("/positions")
    return result
