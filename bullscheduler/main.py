import time

from fastapi import FastAPI, Request

from . import config
from .api import credentials as credentials_api
from .api import nodes as nodes_api
from .logging_config import configure_logging
from .metrics import metrics_response, request_latency_seconds

configure_logging()

app = FastAPI(title="BullScheduler Node Host")

app.include_router(nodes_api.router)
app.include_router(credentials_api.router)


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        return response
    finally:
        request_latency_seconds.observe(time.time() - start)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.get("/readyz")
async def readyz():
    # The service itself is only checked by the credential test
    return {"ready": bool(config.BULLSCHEDULER_URL and config.BULLSCHEDULER_API_KEY)}


@app.get("/metrics")
async def metrics():
    return metrics_response()
