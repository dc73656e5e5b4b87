import httpx
import pytest

from db.session import get_db
from main import app


@pytest.fixture
async def api(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http
    app.dependency_overrides.clear()


async def test_health_check(api):
    response = await api.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Recruiting Pipeline API is running"}


async def test_application_flow_over_http(api, client, position):
    created = await api.post("/applications", json={
        "positionId": position.id,
        "candidate": {"name": "Jane Doe", "email": "jane.doe@example.com"},
    })
    body = created.json()
    assert body["success"] is True, body
    application_id = body["data"]["id"]
    assert body["data"]["status"] == "Initial state"

    duplicate = await api.post("/applications", json={
        "positionId": position.id,
        "candidate": {"name": "Jane Doe", "email": "jane.doe@example.com"},
    })
    assert duplicate.json() == {
        "success": False,
        "error": "This candidate has already applied for this position.",
    }

    updated = await api.patch(f"/applications/{application_id}", json={"status": "Invitation Sent"})
    assert updated.json()["data"]["status"] == "Invitation Sent"

    detail = (await api.get(f"/applications/{application_id}")).json()["data"]
    assert detail["candidate"]["email"] == "jane.doe@example.com"
    assert [event["event_name"] for event in detail["interview_events"]] == ["STATUS_CHANGED", "CANDIDATE_APPLIED"]
    assert detail["interview_events"][0]["details"]["newStatus"] == "Invitation Sent"

    listed = (await api.get(f"/positions/{position.id}/applications")).json()
    assert [item["id"] for item in listed["data"]] == [application_id]

    deleted = (await api.delete(f"/applications/{application_id}")).json()
    assert deleted["success"] is True
    missing = (await api.get(f"/applications/{application_id}")).json()
    assert missing == {"success": False, "error": "Candidate application not found"}


async def test_validation_errors_are_returned_as_issue_lists(api):
    response = await api.post("/applications", json={"candidate": {"name": "Jane"}})

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is False
    assert '"path": ["positionId"]' in body["error"]


async def test_pipeline_configuration_over_http(api, client, other_client, position):
    created_type = (await api.post(
        f"/clients/{client.id}/interview-step-types", json={"name": "Technical"}
    )).json()
    assert created_type["success"] is True, created_type
    type_id = created_type["data"]["id"]

    hidden = (await api.get(f"/clients/{other_client.id}/interview-step-types/{type_id}")).json()
    assert hidden == {"success": False, "error": "Interview step type not found"}

    step = (await api.post("/interview-steps", json={
        "positionId": position.id,
        "sequenceNumber": 1,
        "name": "Pairing session",
        "typeId": type_id,
    })).json()
    assert step["success"] is True, step

    steps = (await api.get(f"/positions/{position.id}/interview-steps")).json()
    assert [item["name"] for item in steps["data"]] == ["Pairing session"]


async def test_position_tech_stacks_over_http(api, client, account_manager):
    created = (await api.post("/positions", json={
        "clientId": client.id,
        "accountManagerId": account_manager.id,
        "title": "Platform Engineer",
        "techStacks": ["Kubernetes", "GO", "go"],
    })).json()

    assert created["success"] is True, created
    assert [stack["name"] for stack in created["data"]["tech_stacks"]] == ["go", "kubernetes"]
