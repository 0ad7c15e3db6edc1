"""BullScheduler job-submission node.

Every input item becomes exactly one ``POST {url}/job`` call against the
BullScheduler service and exactly one output item, in input order. Items are
processed one after the other; the next call starts only once the previous one
has completed.
"""
import json
import logging
import time
from typing import Any, List, Optional, Sequence

import httpx

from . import metrics
from .credentials import CREDENTIAL_NAME, BullSchedulerCredentials
from .errors import (
    InvalidJobDataError,
    MissingTimingError,
    NodeOperationError,
    SchedulerRequestError,
    describe_http_error,
)
from .schemas import (
    DEFAULT_JOB_DATA,
    ErrorRecord,
    JobRequest,
    NodeOutputItem,
    NodeParameters,
    PairedItem,
    ResultRecord,
)
from .utils import NameGenerator, now_iso, random_job_name

logger = logging.getLogger(__name__)

JOB_PATH = "/job"
MISSING_TIMING_MESSAGE = 'Either "Execute At" date or "Delay in Ms" must be provided'

NODE_DESCRIPTION = {
    "displayName": "BullScheduler",
    "name": "bullScheduler",
    "group": ["transform"],
    "version": 1,
    "subtitle": "Schedule jobs",
    "description": "Schedule jobs to execute at specific times or after delays with webhook delivery",
    "defaults": {"name": "BullScheduler"},
    "inputs": ["main"],
    "outputs": ["main"],
    "credentials": [{"name": CREDENTIAL_NAME, "required": True}],
    "properties": [
        {
            "displayName": "Name",
            "name": "jobName",
            "type": "string",
            "default": "",
            "placeholder": "my-job (auto-generated if empty)",
            "description": "Job identifier. If empty, a random string will be generated.",
        },
        {
            "displayName": "Execute At",
            "name": "executeAt",
            "type": "dateTime",
            "default": "",
            "description": "Schedule job to execute at a specific date and time (ISO format)",
        },
        {
            "displayName": "Data",
            "name": "data",
            "type": "string",
            "typeOptions": {"editor": "codeNodeEditor", "editorLanguage": "json"},
            "default": DEFAULT_JOB_DATA,
            "description": "Job payload data as JSON that will be sent to the webhook when the job executes",
            "required": True,
        },
        {
            "displayName": "Advanced Options",
            "name": "advancedOptions",
            "type": "collection",
            "default": {},
            "placeholder": "Add Option",
            "options": [
                {
                    "displayName": "Delay in Ms",
                    "name": "delayMs",
                    "type": "number",
                    "default": 0,
                    "description": "Execute job after delay in milliseconds (alternative to Execute At)",
                },
                {
                    "displayName": "Webhook URL",
                    "name": "webhookUrl",
                    "type": "string",
                    "default": "",
                    "placeholder": "https://your-app.com/webhook",
                    "description": "Override the default webhook URL for this specific job",
                },
            ],
        },
    ],
}


def resolve_job_name(job_name: Optional[str], name_generator: NameGenerator = random_job_name) -> str:
    if not job_name or not job_name.strip():
        return name_generator()
    return job_name


def reject_constant(name: str):
    # json.loads lets NaN and Infinity through, JSON itself does not
    raise ValueError(f"{name} is not valid JSON")


def build_job_request(params: NodeParameters, job_name: str, item_index: int = 0) -> JobRequest:
    """Parse the payload and pick the timing for one item.

    `delayMs` wins over `executeAt` when both are set. Raises before any
    network traffic when the payload or the timing is unusable.
    """
    try:
        data = json.loads(params.data, parse_constant=reject_constant)
    except ValueError as exc:
        raise InvalidJobDataError(f"Invalid JSON in Data field: {exc}", item_index=item_index) from exc

    options = params.advanced_options
    delay_ms = None
    execute_at = None
    if options.delay_ms and options.delay_ms > 0:
        delay_ms = options.delay_ms
    elif params.execute_at:
        execute_at = params.execute_at
    else:
        raise MissingTimingError(MISSING_TIMING_MESSAGE, item_index=item_index)

    webhook_url = (options.webhook_url or "").strip() or None

    return JobRequest(name=job_name, data=data, execute_at=execute_at, delay_ms=delay_ms, webhook_url=webhook_url)


def parse_response_body(response: httpx.Response) -> Any:
    if "json" in response.headers.get("content-type", "") and response.content:
        return response.json()
    return response.text


async def post_job(
    client: httpx.AsyncClient,
    credentials: BullSchedulerCredentials,
    request: JobRequest,
    item_index: int = 0,
) -> Any:
    headers = credentials.authenticate({"Accept": "application/json", "Content-Type": "application/json"})
    start = time.time()
    try:
        response = await client.post(credentials.endpoint(JOB_PATH), json=request.to_body(), headers=headers)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise SchedulerRequestError(describe_http_error(exc), item_index=item_index) from exc
    finally:
        metrics.schedule_latency_seconds.observe(time.time() - start)
    try:
        return parse_response_body(response)
    except ValueError as exc:
        raise SchedulerRequestError(
            f"BullScheduler returned an unreadable JSON body: {exc}", item_index=item_index
        ) from exc


async def submit(
    client: httpx.AsyncClient,
    credentials: BullSchedulerCredentials,
    params: NodeParameters,
    item_index: int = 0,
    job_name: Optional[str] = None,
    name_generator: NameGenerator = random_job_name,
) -> ResultRecord:
    """Schedule the job described by one item and return its result record."""
    if job_name is None:
        job_name = resolve_job_name(params.job_name, name_generator)
    request = build_job_request(params, job_name, item_index)
    response = await post_job(client, credentials, request, item_index)
    # Local wall-clock time, not reconciled with the service's own timestamps
    scheduled_at = now_iso()
    logger.info(
        "scheduled job %s (delayMs=%s, executeAt=%s)", job_name, request.delay_ms, request.execute_at
    )
    return ResultRecord(
        job_name=job_name,
        scheduled=True,
        response=response,
        scheduled_at=scheduled_at,
        execute_at=request.execute_at,
        delay_ms=request.delay_ms,
        data=request.data,
        webhook_url=request.webhook_url,
    )


async def execute(
    client: httpx.AsyncClient,
    credentials: BullSchedulerCredentials,
    items: Sequence[NodeParameters],
    continue_on_fail: bool = False,
    name_generator: NameGenerator = random_job_name,
) -> List[NodeOutputItem]:
    """Run the node over a batch of items.

    With `continue_on_fail` a failing item turns into an error record and the
    batch goes on; otherwise the first NodeOperationError is raised and the
    remaining items are left untouched.
    """
    output: List[NodeOutputItem] = []
    for index, params in enumerate(items):
        job_name = resolve_job_name(params.job_name, name_generator)
        try:
            record = await submit(client, credentials, params, index, job_name=job_name)
        except NodeOperationError as exc:
            metrics.job_errors_total.labels(kind=exc.kind).inc()
            if not continue_on_fail:
                raise
            logger.warning("item %d (%s) failed: %s", index, job_name, exc.message)
            record = ErrorRecord(error=exc.message, job_name=job_name)
        else:
            metrics.jobs_scheduled_total.inc()
        output.append(NodeOutputItem(json=record.model_dump(by_alias=True), paired_item=PairedItem(item=index)))
    return output
