import logging
from fastapi import HTTPException, Request
from clerk_backend_api import Clerk
from clerk_backend_api.security.types import AuthenticateRequestOptions
from app.services.config import settings

logger = logging.getLogger("uvicorn.error")


def authenticate_and_get_user_details(request: Request) -> dict:
    """Verify the Clerk session token on the request and return the caller's id.

    Sign-in, registration, Google sign-in, password reset and sign-out all
    happen in Clerk's hosted flows; this API only checks the resulting session.
    """
    if not settings.CLERK_SECRET_KEY:
        logger.error("CLERK_SECRET_KEY not configured")
        raise HTTPException(status_code=500, detail="Authentication is not configured")

    sdk = Clerk(bearer_auth=settings.CLERK_SECRET_KEY)
    request_state = sdk.authenticate_request(
        request,
        AuthenticateRequestOptions(
            authorized_parties=settings.CLERK_AUTHORIZED_PARTIES or None,
        ),
    )

    if not request_state.is_signed_in:
        logger.warning(f"Rejected unauthenticated request: {request_state.reason}")
        raise HTTPException(status_code=401, detail="Authentication required")

    return {"user_id": request_state.payload.get("sub")}
