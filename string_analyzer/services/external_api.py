import httpx
import logging
from typing import Optional

from string_analyzer import config

logger = logging.getLogger(__name__)

FALLBACK_FACT = "Could not fetch cat fact at the moment"


async def fetch_cat_fact(
    url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Fetch a random cat fact from the Cat Facts API.
    Returns a fallback message if the API fails.
    """
    url = url or config.CAT_FACTS_API
    timeout = config.API_TIMEOUT if timeout is None else timeout

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url)
            response.raise_for_status()
            data = response.json()
    except httpx.TimeoutException:
        logger.error("Cat Facts API request timed out")
        return FALLBACK_FACT
    except httpx.HTTPError as e:
        logger.error(f"HTTP error fetching cat fact: {e}")
        return FALLBACK_FACT
    except ValueError as e:
        logger.error(f"Malformed response from Cat Facts API: {e}")
        return FALLBACK_FACT

    fact = data.get("fact") if isinstance(data, dict) else None
    if not isinstance(fact, str) or not fact:
        logger.warning("Cat Facts API returned no fact")
        return FALLBACK_FACT
    return fact
