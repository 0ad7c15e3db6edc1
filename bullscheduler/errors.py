from typing import Optional

import httpx


class NodeOperationError(Exception):
    """Failure of a single input item.

    `item_index` points at the offending input item so the host can attach the
    error to it, `kind` labels the failure in metrics and `status_code` is what
    the host surface answers with when the batch is aborted.
    """

    kind = "operation"
    status_code = 400

    def __init__(self, message: str, item_index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.item_index = item_index


class InvalidJobDataError(NodeOperationError):
    kind = "invalid_data"


class MissingTimingError(NodeOperationError):
    kind = "missing_timing"


class SchedulerRequestError(NodeOperationError):
    kind = "transport"
    status_code = 502


def describe_http_error(exc: httpx.HTTPError) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        return f"BullScheduler responded with status {response.status_code}: {response.text}"
    return f"BullScheduler request failed: {str(exc) or exc.__class__.__name__}"
