"""Pydantic models for API request/response validation.

Passwords are only accepted in request bodies and are never echoed back.
"""

from pydantic import BaseModel, Field


class BreachCheckRequest(BaseModel):
    """Request model for a breach count lookup."""
    password: str = Field(..., min_length=1, description="Password to check")


class BreachCheckResponse(BaseModel):
    """Response model for breach check.

    breach_count equals the unknown sentinel when the lookup could not be
    completed; is_unknown is set in that case.
    """
    breach_count: int
    is_breached: bool
    is_unknown: bool
    message: str


class ValidateRequest(BaseModel):
    """Request model for password validation and strength."""
    password: str = Field(..., min_length=1, description="Password to validate")
    use_policy: bool = Field(default=False, description="Also apply the local password policy")


class ValidateResponse(BaseModel):
    """Response model for password validation."""
    is_valid: bool
    message: str


class StrengthResponse(BaseModel):
    """Response model for password strength (0-100)."""
    strength: int = Field(..., ge=0, le=100)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    transport_ready: bool
