"""Workflow API routes."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...app import Application
from ...chat import WORKFLOWS
from ...errors import SessionBusyError, UnknownWorkflowError
from .messaging import SendResponse
from .schemas import get_session_or_404, message_to_response


class WorkflowResponse(BaseModel):
    id: str
    name: str
    description: str


def create_workflows_router(app: Application) -> APIRouter:
    """Create workflows router."""
    router = APIRouter(prefix="/api", tags=["workflows"])

    @router.get("/workflows", response_model=list[WorkflowResponse])
    async def list_workflows() -> list[dict]:
        return [
            {"id": w.id, "name": w.name, "description": w.description}
            for w in WORKFLOWS.values()
        ]

    @router.post("/sessions/{session_id}/workflows/{workflow_id}", response_model=SendResponse)
    async def start_workflow(session_id: str, workflow_id: str) -> SendResponse:
        """Clear the dashboard and run a canned analysis prompt."""
        session = get_session_or_404(app, session_id)
        try:
            reply = await session.start_workflow(workflow_id)
        except UnknownWorkflowError:
            raise HTTPException(status_code=404, detail=f"Workflow {workflow_id} not found")
        except SessionBusyError as e:
            raise HTTPException(status_code=409, detail=str(e))

        if reply is None:
            return SendResponse(cancelled=True)
        return SendResponse(message=message_to_response(reply))

    return router
