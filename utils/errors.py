# utils/errors.py

import json
from typing import Any, Dict, List


class ActionError(Exception):
    """Base for failures that become part of an action's result."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_message(self) -> str:
        return self.message


class ValidationError(ActionError):
    """Input failed its schema; ``issues`` holds one entry per violated field."""

    def __init__(self, issues: List[Dict[str, Any]]):
        super().__init__("Invalid input")
        self.issues = issues

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        return cls([
            {"path": list(err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ])

    def to_message(self) -> str:
        return json.dumps(self.issues)


class NotFoundError(ActionError):
    pass


class DuplicateApplicationError(ActionError):
    def __init__(self, message: str = "This candidate has already applied for this position."):
        super().__init__(message)


class ConstraintViolation(ActionError):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    OTHER = "other"

    def __init__(self, message: str, kind: str = OTHER):
        super().__init__(message)
        self.kind = kind

    @staticmethod
    def classify(error_text: str) -> str:
        text = error_text.lower()
        if "unique" in text or "duplicate key" in text:
            return ConstraintViolation.UNIQUE
        if "foreign key" in text:
            return ConstraintViolation.FOREIGN_KEY
        return ConstraintViolation.OTHER
