"""Control API routes: credential selection and status."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...app import Application


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


class CredentialRequest(BaseModel):
    api_key: str


class BackendStatusResponse(BaseModel):
    transport: str
    model: str
    credential_configured: bool
    sessions: int


def create_control_router(app: Application) -> APIRouter:
    """Create control router."""
    router = APIRouter(prefix="/api/control", tags=["control"])

    @router.get("/status", response_model=BackendStatusResponse)
    async def get_status() -> dict:
        return {
            "transport": app.transport.name,
            "model": app.transport.model,
            "credential_configured": app.credentials.is_configured,
            "sessions": len(app.sessions),
        }

    @router.put("/credential", response_model=StatusResponse)
    async def set_credential(request: CredentialRequest) -> dict:
        """Select an API key; takes effect on the next request."""
        try:
            app.credentials.set(request.api_key)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"status": "ok"}

    @router.delete("/credential", response_model=StatusResponse)
    async def clear_credential() -> dict:
        app.credentials.clear()
        return {"status": "ok"}

    return router
