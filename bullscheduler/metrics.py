from fastapi.responses import Response
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

# Keep metrics module-level singletons
jobs_scheduled_total = Counter("jobs_scheduled_total", "Jobs accepted by the BullScheduler service")
job_errors_total = Counter("job_errors_total", "Input items that failed to schedule", ["kind"])
schedule_latency_seconds = Histogram("schedule_latency_seconds", "Time spent on the job-creation call")
credential_tests_total = Counter("credential_tests_total", "Credential connectivity tests", ["result"])
request_latency_seconds = Histogram("request_latency_seconds", "HTTP request latency seconds")


def metrics_response():
    # Return prometheus metrics as a Response
    payload = generate_latest()
    return Response(content=payload, media_type=CONTENT_TYPE_LATEST)
