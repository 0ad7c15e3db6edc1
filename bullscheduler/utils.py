import random
import string
from datetime import datetime, timezone
from typing import Callable

JOB_NAME_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
JOB_NAME_PREFIX = "job-"

NameGenerator = Callable[[], str]


def generate_random_string(length: int = 8) -> str:
    # Not cryptographic; collisions are possible and never checked
    return "".join(random.choice(JOB_NAME_ALPHABET) for _ in range(length))


def random_job_name() -> str:
    """Job name like 'job-aZ3kQ9xT'."""
    return f"{JOB_NAME_PREFIX}{generate_random_string()}"


def now_iso() -> str:
    """UTC timestamp like '2025-11-06T09:12:34.123Z'."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
