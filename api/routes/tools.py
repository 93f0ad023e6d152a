"""Password breach endpoints.

Public endpoints for breach lookup, validation and strength. Handlers are
plain functions so FastAPI runs the blocking lookups in its threadpool.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import (
    BREACH_CHECK_RATE_LIMIT,
    build_validation,
    get_checker_factory,
    limiter,
)
from api.models import (
    BreachCheckRequest,
    BreachCheckResponse,
    StrengthResponse,
    ValidateRequest,
    ValidateResponse,
)
from breachcheck import UNKNOWN_RESULT, password_breach_check
from breachcheck.validation import CheckerFactory, format_breach_warning


router = APIRouter(tags=["Password Breach Check"])


@router.post("/breach-check", response_model=BreachCheckResponse)
@limiter.limit(BREACH_CHECK_RATE_LIMIT)
def check_breach(
    request: Request,
    body: BreachCheckRequest,
    checker_factory: CheckerFactory = Depends(get_checker_factory),
):
    """Check how many times a password appears in known data breaches."""
    breach_count = password_breach_check(body.password, checker_factory=checker_factory)
    is_unknown = breach_count == UNKNOWN_RESULT

    return BreachCheckResponse(
        breach_count=breach_count,
        is_breached=not is_unknown and breach_count > 0,
        is_unknown=is_unknown,
        message=format_breach_warning(breach_count),
    )


@router.post("/validate", response_model=ValidateResponse)
@limiter.limit(BREACH_CHECK_RATE_LIMIT)
def validate_password(
    request: Request,
    body: ValidateRequest,
    checker_factory: CheckerFactory = Depends(get_checker_factory),
):
    """Accept or reject a password for use."""
    validation = build_validation(checker_factory, body.use_policy)
    is_valid = validation.validate(body.password)

    if is_valid:
        message = "Password accepted"
    else:
        message = "Password rejected: breached, unverifiable, or below policy"

    return ValidateResponse(is_valid=is_valid, message=message)


@router.post("/strength", response_model=StrengthResponse)
@limiter.limit(BREACH_CHECK_RATE_LIMIT)
def password_strength(
    request: Request,
    body: ValidateRequest,
    checker_factory: CheckerFactory = Depends(get_checker_factory),
):
    """Get password strength between 0 (weak) and 100 (strong)."""
    validation = build_validation(checker_factory, body.use_policy)
    return StrengthResponse(strength=validation.get_strength(body.password))
