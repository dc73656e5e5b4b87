import uuid

from models.pipeline import step_types, steps
from models.pipeline.model import InterviewStep, InterviewStepType


async def create_type(db, owner, name="Technical"):
    result = await step_types.create_interview_step_type(db, {"name": name, "clientId": owner.id})
    assert result.success, result.error
    return result.data


def step_payload(position, step_type, sequence_number=1, name="Technical interview", **extra):
    return {
        "positionId": position.id,
        "sequenceNumber": sequence_number,
        "name": name,
        "typeId": step_type.id,
        **extra,
    }


# =====================
# STEP TYPES
# =====================

async def test_step_types_are_scoped_to_their_client(db, client, other_client):
    technical = await create_type(db, client)
    await create_type(db, client, "Cultural fit")
    await create_type(db, other_client, "Technical")

    listed = await step_types.get_interview_step_types(db, client.id)

    assert [st.name for st in listed.data] == ["Cultural fit", "Technical"]
    assert (await step_types.get_interview_step_type(db, technical.id, client.id)).data.id == technical.id


async def test_foreign_client_cannot_see_or_touch_a_step_type(db, client, other_client, fetch_one):
    technical = await create_type(db, client)

    fetched = await step_types.get_interview_step_type(db, technical.id, other_client.id)
    updated = await step_types.update_interview_step_type(db, technical.id, other_client.id, {"name": "Hijacked"})
    deleted = await step_types.delete_interview_step_type(db, technical.id, other_client.id)

    for result in (fetched, updated, deleted):
        assert not result.success
        assert result.error == "Interview step type not found"

    stored = await fetch_one(InterviewStepType, InterviewStepType.id == technical.id)
    assert stored.name == "Technical"


async def test_step_type_names_are_unique_per_client(db, client):
    await create_type(db, client)

    duplicate = await step_types.create_interview_step_type(db, {"name": "Technical", "clientId": client.id})

    assert duplicate.error == "An interview step type with this name already exists for this client"


async def test_step_type_for_unknown_client(db, account_manager):
    result = await step_types.create_interview_step_type(db, {"name": "Technical", "clientId": str(uuid.uuid4())})

    assert result.error == "Client not found"


async def test_step_type_update_and_empty_update(db, client):
    technical = await create_type(db, client)
    paths = []

    renamed = await step_types.update_interview_step_type(
        db, technical.id, client.id, {"name": "Live coding"}, revalidate=paths.append
    )
    unchanged = await step_types.update_interview_step_type(db, technical.id, client.id, {})

    assert renamed.data.name == "Live coding"
    assert unchanged.data.name == "Live coding"
    assert paths == [f"/clients/{client.id}/interview-step-types"]


async def test_step_type_in_use_cannot_be_deleted(db, client, position, count_rows):
    technical = await create_type(db, client)
    assert (await steps.create_interview_step(db, step_payload(position, technical))).success

    result = await step_types.delete_interview_step_type(db, technical.id, client.id)

    assert result.error == "Interview step type is still used by interview steps"
    assert await count_rows(InterviewStepType) == 1


async def test_unused_step_type_is_deleted(db, client, count_rows):
    technical = await create_type(db, client)

    result = await step_types.delete_interview_step_type(db, technical.id, client.id)

    assert result.success
    assert result.data is None
    assert await count_rows(InterviewStepType) == 0


# =====================
# STEPS
# =====================

async def test_steps_are_listed_in_sequence_order_with_gaps(db, client, position):
    technical = await create_type(db, client)
    paths = []

    for number, name in ((3, "Final"), (1, "Screening"), (2, "Take-home")):
        result = await steps.create_interview_step(
            db,
            step_payload(position, technical, number, name, schedulingLink="https://cal.example.com/team"),
            revalidate=paths.append,
        )
        assert result.success, result.error

    await steps.create_interview_step(db, step_payload(position, technical, 10, "Offer call"))

    listed = await steps.get_interview_steps_for_position(db, position.id)

    assert [step.sequence_number for step in listed.data] == [1, 2, 3, 10]
    assert listed.data[0].scheduling_link == "https://cal.example.com/team"
    assert set(paths) == {f"/positions/{position.id}"}


async def test_step_with_foreign_step_type_is_rejected(db, client, other_client, position, count_rows):
    foreign_type = await create_type(db, other_client)

    result = await steps.create_interview_step(db, step_payload(position, foreign_type))

    assert result.error == "Interview step type not found for this client"
    assert await count_rows(InterviewStep) == 0


async def test_step_for_unknown_position(db, client):
    technical = await create_type(db, client)
    result = await steps.create_interview_step(
        db,
        {"positionId": str(uuid.uuid4()), "sequenceNumber": 1, "name": "Screening", "typeId": technical.id},
    )

    assert result.error == "Position not found"


async def test_duplicate_sequence_number_is_rejected(db, client, position):
    technical = await create_type(db, client)
    await steps.create_interview_step(db, step_payload(position, technical, 1))

    duplicate = await steps.create_interview_step(db, step_payload(position, technical, 1, "Another"))

    assert duplicate.error == "An interview step with this sequence number already exists for this position"


async def test_step_sequence_number_must_be_positive(db, client, position):
    technical = await create_type(db, client)

    result = await steps.create_interview_step(db, step_payload(position, technical, 0))

    assert not result.success
    assert "sequenceNumber" in result.error


async def test_step_update_checks_type_ownership(db, client, other_client, position):
    technical = await create_type(db, client)
    cultural = await create_type(db, client, "Cultural fit")
    foreign_type = await create_type(db, other_client, "Foreign")
    step = (await steps.create_interview_step(db, step_payload(position, technical))).data

    moved = await steps.update_interview_step(db, step.id, {"typeId": cultural.id, "sequenceNumber": 4})
    rejected = await steps.update_interview_step(db, step.id, {"typeId": foreign_type.id})

    assert moved.success, moved.error
    assert moved.data.type_id == cultural.id
    assert moved.data.sequence_number == 4
    assert rejected.error == "Interview step type not found for this client"
    assert (await steps.get_interview_step(db, step.id)).data.type_id == cultural.id


async def test_step_delete(db, client, position):
    technical = await create_type(db, client)
    step = (await steps.create_interview_step(db, step_payload(position, technical))).data

    deleted = await steps.delete_interview_step(db, step.id)
    missing = await steps.get_interview_step(db, step.id)

    assert deleted.success
    assert deleted.data.id == step.id
    assert missing.error == "Interview step not found"


async def test_position_with_steps_cannot_move_to_another_client(db, client, other_client, position, fetch_one):
    from models.positions import service as positions
    from models.positions.model import Position

    technical = await create_type(db, client)
    assert (await steps.create_interview_step(db, step_payload(position, technical))).success

    moved = await positions.update_position(db, position.id, {"clientId": other_client.id, "title": "Moved"})

    assert not moved.success
    assert moved.error == "Position has interview steps using another client's step types"
    stored = await fetch_one(Position, Position.id == position.id)
    assert stored.client_id == client.id
    assert stored.title == "Senior Software Engineer"


async def test_position_without_steps_can_move_to_another_client(db, other_client, position):
    from models.positions import service as positions

    moved = await positions.update_position(db, position.id, {"clientId": other_client.id})

    assert moved.success, moved.error
    assert moved.data.client_id == other_client.id
