from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Literal, Optional

DEFAULT_JOB_DATA = '{\n  "userId": 123,\n  "action": "send-reminder"\n}'


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AdvancedOptions(CamelModel):
    delay_ms: Optional[int] = Field(default=None, ge=0)
    webhook_url: Optional[str] = None


class NodeParameters(CamelModel):
    """Item-scoped parameters of one input item, already resolved by the host."""

    job_name: str = ""
    execute_at: Optional[str] = ""
    data: str = DEFAULT_JOB_DATA
    advanced_options: AdvancedOptions = Field(default_factory=AdvancedOptions)


class JobRequest(CamelModel):
    name: str
    data: Any = None
    execute_at: Optional[str] = None
    delay_ms: Optional[int] = None
    webhook_url: Optional[str] = None

    def to_body(self) -> Dict[str, Any]:
        # Unset options are left out; `data` is always sent, even as null
        body: Dict[str, Any] = {"name": self.name, "data": self.data}
        if self.execute_at is not None:
            body["executeAt"] = self.execute_at
        if self.delay_ms is not None:
            body["delayMs"] = self.delay_ms
        if self.webhook_url is not None:
            body["webhookUrl"] = self.webhook_url
        return body


class ResultRecord(CamelModel):
    job_name: str
    scheduled: bool = True
    response: Any = None
    scheduled_at: str
    execute_at: Optional[str] = None
    delay_ms: Optional[int] = None
    data: Any = None
    webhook_url: Optional[str] = None


class ErrorRecord(CamelModel):
    error: str
    job_name: str
    scheduled: bool = False


class PairedItem(CamelModel):
    item: int


class NodeOutputItem(CamelModel):
    json_: Dict[str, Any] = Field(alias="json")
    paired_item: PairedItem


class ExecuteRequest(CamelModel):
    items: List[NodeParameters]
    continue_on_fail: bool = False


class ExecuteResponse(CamelModel):
    items: List[NodeOutputItem]


class CredentialTestResult(CamelModel):
    status: Literal["OK", "Error"]
    message: str
