import secrets
from typing import Optional

from fastapi import HTTPException, Security
from fastapi.security.api_key import APIKeyHeader

from . import config

HOST_KEY_HEADER = "X-API-Key"

host_key_header = APIKeyHeader(name=HOST_KEY_HEADER, auto_error=False)


async def require_host_key(host_key: Optional[str] = Security(host_key_header)) -> bool:
    """Guard for the endpoints that reach out to BullScheduler."""
    if not host_key:
        raise HTTPException(status_code=401, detail=f"{HOST_KEY_HEADER} header required")
    if not secrets.compare_digest(host_key.encode(), config.API_KEY.encode()):
        raise HTTPException(status_code=403, detail=f"{HOST_KEY_HEADER} not accepted")
    return True
