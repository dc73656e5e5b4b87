# utils/actions.py

import functools
from typing import Awaitable, Callable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schemas.result import ActionResult
from utils.errors import ActionError, ConstraintViolation, ValidationError
from utils.logger import AppLogger

logger = AppLogger.get_logger(__name__)

DEFAULT_UNIQUE_MESSAGE = "A record with the same unique values already exists."
DEFAULT_FOREIGN_KEY_MESSAGE = "A referenced record does not exist."


def constraint_violation(
    exc: IntegrityError,
    unique: Optional[str] = None,
    foreign_key: Optional[str] = None,
) -> ConstraintViolation:
    kind = ConstraintViolation.classify(str(exc.orig))
    if kind == ConstraintViolation.UNIQUE:
        return ConstraintViolation(unique or DEFAULT_UNIQUE_MESSAGE, kind)
    if kind == ConstraintViolation.FOREIGN_KEY:
        return ConstraintViolation(foreign_key or DEFAULT_FOREIGN_KEY_MESSAGE, kind)
    return ConstraintViolation("The change violates a data constraint.", kind)


async def _discard_transaction(db: Optional[AsyncSession]) -> None:
    if isinstance(db, AsyncSession) and db.in_transaction():
        await db.rollback()


def server_action(
    fallback: str,
    unique: Optional[str] = None,
    foreign_key: Optional[str] = None,
):
    """Error boundary for a public operation.

    The wrapped coroutine returns plain data or raises; the wrapper always
    returns an ``ActionResult``. Known failures keep their message,
    storage constraint failures get the messages given here and anything
    else is logged and reported as ``fallback``.
    """

    def decorator(func: Callable[..., Awaitable]):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> ActionResult:
            db = args[0] if args else kwargs.get("db")
            try:
                return ActionResult.ok(await func(*args, **kwargs))
            except ValidationError as exc:
                logger.info(f"{func.__name__}: rejected input {exc.issues}")
                return ActionResult.fail(exc.to_message())
            except ActionError as exc:
                await _discard_transaction(db)
                logger.warning(f"{func.__name__}: {exc.to_message()}")
                return ActionResult.fail(exc.to_message())
            except IntegrityError as exc:
                await _discard_transaction(db)
                violation = constraint_violation(exc, unique, foreign_key)
                logger.warning(f"{func.__name__}: {violation.kind} constraint failed: {exc.orig}")
                return ActionResult.fail(violation.to_message())
            except Exception:
                await _discard_transaction(db)
                logger.exception(f"{func.__name__}: unexpected failure")
                return ActionResult.fail(fallback)

        return wrapper

    return decorator
