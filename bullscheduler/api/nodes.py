import httpx
from fastapi import APIRouter, Depends, HTTPException

from .. import node
from ..auth import require_host_key
from ..credentials import BullSchedulerCredentials
from ..errors import NodeOperationError
from ..schemas import ExecuteRequest, ExecuteResponse
from .deps import get_credentials, get_http_client

router = APIRouter(prefix="/nodes/bull-scheduler")


@router.get("")
async def describe_node():
    return node.NODE_DESCRIPTION


@router.post("/execute", response_model=ExecuteResponse)
async def execute_node(
    body: ExecuteRequest,
    authorized: bool = Depends(require_host_key),
    credentials: BullSchedulerCredentials = Depends(get_credentials),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    try:
        items = await node.execute(client, credentials, body.items, continue_on_fail=body.continue_on_fail)
    except NodeOperationError as exc:
        raise HTTPException(status_code=exc.status_code, detail={"message": exc.message, "itemIndex": exc.item_index})
    return ExecuteResponse(items=items)
