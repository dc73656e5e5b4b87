# main.py
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import Body, Depends, FastAPI, status
from sqlalchemy.ext.asyncio import AsyncSession

from config import add_cors_middleware
from db.session import engine, get_db, init_models
from models.applications.lifecycle import (
    create_candidate_application,
    delete_candidate_application,
    get_candidate_application,
    get_candidate_applications_for_position,
    update_candidate_application,
)
from models.interviewers.service import (
    create_interviewer,
    delete_interviewer,
    get_interviewer,
    get_interviewers,
    update_interviewer,
)
from models.pipeline.step_types import (
    create_interview_step_type,
    delete_interview_step_type,
    get_interview_step_type,
    get_interview_step_types,
    update_interview_step_type,
)
from models.pipeline.steps import (
    create_interview_step,
    delete_interview_step,
    get_interview_step,
    get_interview_steps_for_position,
    update_interview_step,
)
from models.positions.service import create_position, delete_position, get_position, get_positions, update_position


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models(engine)
    yield
    await engine.dispose()


app = FastAPI(
    title="Recruiting Pipeline API",
    description="Candidate applications, interview pipelines and tech-stack tagging for client positions.",
    version="1.0.0",
    lifespan=lifespan,
)

add_cors_middleware(app)

# Every route answers with the operation's tagged result:
# {"success": true, "data": ...} or {"success": false, "error": "..."}
Payload = Dict[str, Any]


@app.get("/", summary="Health check")
async def read_root():
    return {"message": "Recruiting Pipeline API is running"}


# =====================
# CANDIDATE APPLICATIONS
# =====================

@app.post("/applications", status_code=status.HTTP_200_OK, summary="Apply a candidate to a position")
async def create_application_endpoint(payload: Payload = Body(...), db: AsyncSession = Depends(get_db)):
    return (await create_candidate_application(db, payload)).to_response()


@app.get("/applications/{application_id}", summary="Application with candidate and event history")
async def get_application_endpoint(application_id: str, db: AsyncSession = Depends(get_db)):
    return (await get_candidate_application(db, application_id)).to_response()


@app.patch("/applications/{application_id}", summary="Update status, notification time or current step")
async def update_application_endpoint(
    application_id: str,
    payload: Payload = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return (await update_candidate_application(db, application_id, payload)).to_response()


@app.delete("/applications/{application_id}", summary="Delete an application and its events")
async def delete_application_endpoint(application_id: str, db: AsyncSession = Depends(get_db)):
    return (await delete_candidate_application(db, application_id)).to_response()


@app.get("/positions/{position_id}/applications", summary="Applications for a position, newest first")
async def list_position_applications_endpoint(position_id: str, db: AsyncSession = Depends(get_db)):
    return (await get_candidate_applications_for_position(db, position_id)).to_response()


# =====================
# POSITIONS
# =====================

@app.post("/positions", summary="Create a position with its tech stacks")
async def create_position_endpoint(payload: Payload = Body(...), db: AsyncSession = Depends(get_db)):
    return (await create_position(db, payload)).to_response()


@app.get("/positions", summary="All positions")
async def list_positions_endpoint(db: AsyncSession = Depends(get_db)):
    return (await get_positions(db)).to_response()


@app.get("/positions/{position_id}", summary="Position with its tech stacks")
async def get_position_endpoint(position_id: str, db: AsyncSession = Depends(get_db)):
    return (await get_position(db, position_id)).to_response()


@app.patch("/positions/{position_id}", summary="Update a position")
async def update_position_endpoint(
    position_id: str,
    payload: Payload = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return (await update_position(db, position_id, payload)).to_response()


@app.delete("/positions/{position_id}", summary="Delete a position")
async def delete_position_endpoint(position_id: str, db: AsyncSession = Depends(get_db)):
    return (await delete_position(db, position_id)).to_response()


# =====================
# INTERVIEW PIPELINE
# =====================

@app.get("/positions/{position_id}/interview-steps", summary="Pipeline steps in sequence order")
async def list_position_steps_endpoint(position_id: str, db: AsyncSession = Depends(get_db)):
    return (await get_interview_steps_for_position(db, position_id)).to_response()


@app.post("/interview-steps", summary="Add a step to a position's pipeline")
async def create_step_endpoint(payload: Payload = Body(...), db: AsyncSession = Depends(get_db)):
    return (await create_interview_step(db, payload)).to_response()


@app.get("/interview-steps/{step_id}")
async def get_step_endpoint(step_id: str, db: AsyncSession = Depends(get_db)):
    return (await get_interview_step(db, step_id)).to_response()


@app.patch("/interview-steps/{step_id}")
async def update_step_endpoint(
    step_id: str,
    payload: Payload = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return (await update_interview_step(db, step_id, payload)).to_response()


@app.delete("/interview-steps/{step_id}")
async def delete_step_endpoint(step_id: str, db: AsyncSession = Depends(get_db)):
    return (await delete_interview_step(db, step_id)).to_response()


@app.post("/clients/{client_id}/interview-step-types", summary="Create a step type owned by the client")
async def create_step_type_endpoint(
    client_id: str,
    payload: Payload = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return (await create_interview_step_type(db, {**payload, "client_id": client_id})).to_response()


@app.get("/clients/{client_id}/interview-step-types")
async def list_step_types_endpoint(client_id: str, db: AsyncSession = Depends(get_db)):
    return (await get_interview_step_types(db, client_id)).to_response()


@app.get("/clients/{client_id}/interview-step-types/{step_type_id}")
async def get_step_type_endpoint(client_id: str, step_type_id: str, db: AsyncSession = Depends(get_db)):
    return (await get_interview_step_type(db, step_type_id, client_id)).to_response()


@app.patch("/clients/{client_id}/interview-step-types/{step_type_id}")
async def update_step_type_endpoint(
    client_id: str,
    step_type_id: str,
    payload: Payload = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return (await update_interview_step_type(db, step_type_id, client_id, payload)).to_response()


@app.delete("/clients/{client_id}/interview-step-types/{step_type_id}")
async def delete_step_type_endpoint(client_id: str, step_type_id: str, db: AsyncSession = Depends(get_db)):
    return (await delete_interview_step_type(db, step_type_id, client_id)).to_response()


# =====================
# INTERVIEWERS
# =====================

@app.post("/interviewers", summary="Create an interviewer with tech stacks")
async def create_interviewer_endpoint(payload: Payload = Body(...), db: AsyncSession = Depends(get_db)):
    return (await create_interviewer(db, payload)).to_response()


@app.get("/interviewers")
async def list_interviewers_endpoint(db: AsyncSession = Depends(get_db)):
    return (await get_interviewers(db)).to_response()


@app.get("/interviewers/{interviewer_id}")
async def get_interviewer_endpoint(interviewer_id: str, db: AsyncSession = Depends(get_db)):
    return (await get_interviewer(db, interviewer_id)).to_response()


@app.patch("/interviewers/{interviewer_id}")
async def update_interviewer_endpoint(
    interviewer_id: str,
    payload: Payload = Body(...),
    db: AsyncSession = Depends(get_db),
):
    return (await update_interviewer(db, interviewer_id, payload)).to_response()


@app.delete("/interviewers/{interviewer_id}")
async def delete_interviewer_endpoint(interviewer_id: str, db: AsyncSession = Depends(get_db)):
    return (await delete_interviewer(db, interviewer_id)).to_response()
