from dataclasses import dataclass
from typing import Iterable, List, Optional, Type

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from db.base import new_id
from models.tech_stacks.model import InterviewerTechStack, PositionTechStack, TechStack
from utils.logger import AppLogger

logger = AppLogger.get_logger(__name__)


@dataclass(frozen=True)
class TagJunction:
    """A junction table linking some owner row to tech stacks."""
    model: Type
    owner_column: str

    @property
    def owner(self):
        return getattr(self.model, self.owner_column)


POSITION_TECH_STACKS = TagJunction(PositionTechStack, "position_id")
INTERVIEWER_TECH_STACKS = TagJunction(InterviewerTechStack, "interviewer_id")


# =====================
# HELPERS
# =====================

def normalize_tag_names(names: Iterable[str]) -> List[str]:
    """Lower-case, trim and de-duplicate, keeping first-seen order."""
    cleaned = (name.strip().lower() for name in names if name is not None)
    return list(dict.fromkeys(name for name in cleaned if name))


async def clear_tags(db: AsyncSession, owner_id: str, junction: TagJunction) -> None:
    await db.execute(delete(junction.model).where(junction.owner == owner_id))


# =====================
# RECONCILER
# =====================

async def reconcile_tags(
    db: AsyncSession,
    names: Optional[Iterable[str]],
    owner_id: str,
    junction: TagJunction,
    replace: bool = False,
) -> List[TechStack]:
    """Link ``owner_id`` to the tech stacks called ``names``, creating missing ones.

    ``names=None`` leaves the owner's links alone. With ``replace=True``
    every existing link is dropped first, so an empty list clears them.
    Runs inside the caller's transaction: one lookup query, one insert for
    new stacks and one insert for the links.
    """
    if names is None:
        return []

    if replace:
        await clear_tags(db, owner_id, junction)

    normalized = normalize_tag_names(names)
    if not normalized:
        return []

    result = await db.execute(select(TechStack).where(TechStack.name.in_(normalized)))
    existing = {stack.name: stack for stack in result.scalars().all()}

    missing = [name for name in normalized if name not in existing]
    if missing:
        new_rows = [{"id": new_id(), "name": name} for name in missing]
        await db.execute(insert(TechStack), new_rows)
        logger.info(f"Created tech stacks: {', '.join(missing)}")
        created = await db.execute(select(TechStack).where(TechStack.name.in_(missing)))
        existing.update({stack.name: stack for stack in created.scalars().all()})

    stacks = [existing[name] for name in normalized]
    await db.execute(
        insert(junction.model),
        [{junction.owner_column: owner_id, "tech_stack_id": stack.id} for stack in stacks],
    )
    return stacks
