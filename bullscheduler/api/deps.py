import httpx
from fastapi import HTTPException

from .. import config
from ..credentials import BullSchedulerCredentials


def get_credentials() -> BullSchedulerCredentials:
    if not config.BULLSCHEDULER_URL or not config.BULLSCHEDULER_API_KEY:
        raise HTTPException(status_code=503, detail="BullScheduler credentials are not configured")
    return BullSchedulerCredentials(url=config.BULLSCHEDULER_URL, api_key=config.BULLSCHEDULER_API_KEY)


async def get_http_client():
    async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT) as client:
        yield client
