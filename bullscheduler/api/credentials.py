import httpx
from fastapi import APIRouter, Depends

from ..auth import require_host_key
from ..credentials import CREDENTIAL_DESCRIPTOR, BullSchedulerCredentials, verify_credentials
from ..schemas import CredentialTestResult
from .deps import get_credentials, get_http_client

router = APIRouter(prefix="/credentials/bull-scheduler")


@router.get("")
async def describe_credentials():
    return CREDENTIAL_DESCRIPTOR


@router.post("/test", response_model=CredentialTestResult)
async def run_credential_test(
    authorized: bool = Depends(require_host_key),
    credentials: BullSchedulerCredentials = Depends(get_credentials),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    return await verify_credentials(client, credentials)
