import logging

import pytest

from utils.actions import server_action
from utils.errors import ConstraintViolation, NotFoundError


@pytest.mark.parametrize("text, kind", [
    ("UNIQUE constraint failed: candidates.email", ConstraintViolation.UNIQUE),
    ('duplicate key value violates unique constraint "candidates_email_key"', ConstraintViolation.UNIQUE),
    ("FOREIGN KEY constraint failed", ConstraintViolation.FOREIGN_KEY),
    ('insert or update on table "x" violates foreign key constraint "x_fk"', ConstraintViolation.FOREIGN_KEY),
    ("NOT NULL constraint failed: candidates.name", ConstraintViolation.OTHER),
])
def test_constraint_classification(text, kind):
    assert ConstraintViolation.classify(text) == kind


async def test_successful_action_wraps_its_value():
    @server_action("Failed to greet")
    async def greet(db, name):
        return f"hello {name}"

    result = await greet(None, "jane")

    assert result.success
    assert result.data == "hello jane"
    assert result.to_response() == {"success": True, "data": "hello jane"}


async def test_known_errors_keep_their_message():
    @server_action("Failed to find")
    async def find(db):
        raise NotFoundError("Widget not found")

    result = await find(None)

    assert result.to_response() == {"success": False, "error": "Widget not found"}


async def test_unexpected_errors_are_logged_and_hidden(caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger("utils.actions"), "propagate", True)

    @server_action("Failed to do the thing")
    async def explode(db):
        raise KeyError("internal detail")

    with caplog.at_level(logging.ERROR):
        result = await explode(None)

    assert result.error == "Failed to do the thing"
    assert "internal detail" not in result.error
    assert "explode: unexpected failure" in caplog.text
