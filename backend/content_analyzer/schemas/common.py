from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None


class HealthResponse(BaseModel):
    ok: bool = True
    service: str
    version: str
