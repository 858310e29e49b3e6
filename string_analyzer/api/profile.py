from fastapi import APIRouter
from datetime import datetime, timezone
import logging

from string_analyzer import config
from string_analyzer.schemas import ProfileResponse, ProfileUser
from string_analyzer.services.external_api import fetch_cat_fact

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/me", response_model=ProfileResponse)
async def get_profile():
    """
    Profile information with a dynamic cat fact.
    The fact falls back to a fixed message when the source is unavailable.
    """
    current_timestamp = datetime.now(timezone.utc).isoformat()
    cat_fact = await fetch_cat_fact()

    logger.info(f"Profile request served at {current_timestamp}")

    return ProfileResponse(
        user=ProfileUser(
            email=config.USER_EMAIL,
            name=config.USER_NAME,
            stack=config.USER_STACK,
        ),
        timestamp=current_timestamp,
        fact=cat_fact,
    )
