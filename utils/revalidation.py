# utils/revalidation.py

from typing import Callable

from utils.logger import AppLogger

logger = AppLogger.get_logger(__name__)

Revalidator = Callable[[str], None]


def revalidate_path(path: str) -> None:
    """Default hook: cached views live outside this service, so only record the request."""
    logger.debug(f"Revalidation requested for {path}")


def position_path(position_id: str) -> str:
    return f"/positions/{position_id}"


def step_types_path(client_id: str) -> str:
    return f"/clients/{client_id}/interview-step-types"
