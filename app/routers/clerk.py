from fastapi import APIRouter, Request, HTTPException
from app.models.user import User
from app.services.config import settings
from svix.webhooks import Webhook, WebhookVerificationError
import json, logging
from datetime import datetime, timezone
from app.utils.db import ensure_db_initialized

router = APIRouter(
    prefix="/webhooks",
    tags=["Webhooks"]
)
logger = logging.getLogger("uvicorn.error")

HANDLED_EVENTS = ("user.created", "user.updated")


def _display_name(first_name, last_name):
    name = " ".join(part for part in (first_name, last_name) if part)
    return name or None


@router.post("/clerk")
async def handle_clerk_webhook(request: Request):
    webhook_secret = settings.CLERK_WEBHOOK_SECRET
    if not webhook_secret:
        raise HTTPException(status_code=500, detail="CLERK_WEBHOOK_SECRET not configured")

    # Read the raw body (must remain unmodified for Svix verification)
    body = await request.body()
    payload = body.decode("utf-8")
    headers = dict(request.headers)

    if not all(h in headers for h in ["svix-id", "svix-timestamp", "svix-signature"]):
        logger.error("Missing required Svix headers")
        raise HTTPException(status_code=400, detail="Missing Svix headers")

    try:
        Webhook(webhook_secret).verify(payload, headers)
    except WebhookVerificationError as e:
        logger.error(f"Webhook signature verification failed: {repr(e)}")
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    event = json.loads(payload)
    if event.get("type") not in HANDLED_EVENTS:
        logger.info(f"Ignored event type: {event.get('type')}")
        return {"status": "ignored"}

    user_data = event.get("data", {})

    clerk_id = user_data.get("id")
    email = (user_data.get("email_addresses") or [{}])[0].get("email_address")
    first_name = user_data.get("first_name")
    last_name = user_data.get("last_name")
    profile_img = user_data.get("profile_image_url")

    if not clerk_id or not email:
        logger.error("Invalid user data received from Clerk webhook")
        raise HTTPException(status_code=400, detail="Invalid user data")

    await ensure_db_initialized()

    user = await User.find_one(User.clerk_id == clerk_id)
    now = datetime.now(timezone.utc)

    if user:
        user.email = email
        user.first_name = first_name
        user.last_name = last_name
        user.display_name = _display_name(first_name, last_name)
        user.profile_image_url = profile_img
        user.updated_at = now
        await user.save()
        logger.info(f"Updated existing user: {clerk_id}")
    else:
        new_user = User(
            clerk_id=clerk_id,
            email=email,
            first_name=first_name,
            last_name=last_name,
            display_name=_display_name(first_name, last_name),
            profile_image_url=profile_img,
            created_at=now,
            updated_at=now,
        )
        await new_user.insert()
        logger.info(f"Created new user: {clerk_id}")

    return {"status": "success"}
