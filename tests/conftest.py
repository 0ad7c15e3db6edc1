import os
from typing import Optional

import httpx
import pytest
from fastapi import FastAPI, Header, HTTPException, Request

os.environ["API_KEY"] = "dev-key"

from bullscheduler.main import app as host_app
from bullscheduler.api.deps import get_credentials, get_http_client
from bullscheduler.credentials import BullSchedulerCredentials

SCHEDULER_URL = "http://scheduler.test"
SCHEDULER_API_KEY = "test-api-key"


class FakeScheduler:
    """In-process stand-in for the BullScheduler service.

    Every POST /job body is recorded in `requests`, including the ones it
    rejects. Jobs whose name is in `fail_names` get a 500.
    """

    def __init__(self):
        self.requests = []
        self.verify_calls = 0
        self.fail_names = set()
        self.app = self._build_app()

    def _check(self, authorization: Optional[str]):
        if authorization != f"Bearer {SCHEDULER_API_KEY}":
            raise HTTPException(status_code=401, detail="Invalid API key")

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.get("/verify-auth")
        async def verify_auth(authorization: Optional[str] = Header(default=None)):
            self.verify_calls += 1
            self._check(authorization)
            return {"valid": True}

        @app.post("/job")
        async def create_job(request: Request, authorization: Optional[str] = Header(default=None)):
            self._check(authorization)
            body = await request.json()
            self.requests.append(body)
            if body.get("name") in self.fail_names:
                raise HTTPException(status_code=500, detail="queue unavailable")
            return {"id": str(len(self.requests)), "name": body["name"], "status": "scheduled"}

        return app


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def credentials():
    return BullSchedulerCredentials(url=SCHEDULER_URL, api_key=SCHEDULER_API_KEY)


@pytest.fixture
async def http_client(scheduler):
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=scheduler.app)) as ac:
        yield ac


@pytest.fixture
async def client(http_client, credentials):
    async def override_http_client():
        yield http_client

    host_app.dependency_overrides[get_http_client] = override_http_client
    host_app.dependency_overrides[get_credentials] = lambda: credentials
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=host_app), base_url="http://testserver") as ac:
        yield ac
    host_app.dependency_overrides.clear()
