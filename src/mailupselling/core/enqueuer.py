"""Durable background job scheduling on RQ."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Sequence
from typing import Any

from rq import Queue, Retry

from mailupselling.upselling_logging.service_logging import get_logger

logger = get_logger(__name__)


class Enqueuer:
    """Schedule one-shot jobs on an RQ queue with a shared retry policy."""

    def __init__(
        self,
        queue: Queue,
        max_retries: int = 3,
        retry_intervals: Sequence[int] | None = None,
        result_ttl: int = 3600,
    ) -> None:
        self.queue = queue
        self.max_retries = max_retries
        self.retry_intervals = list(retry_intervals or [])
        self.result_ttl = result_ttl

    def _retry(self) -> Retry | None:
        if self.max_retries < 1:
            return None
        if self.retry_intervals:
            return Retry(max=self.max_retries, interval=self.retry_intervals)
        return Retry(max=self.max_retries)

    def enqueue(
        self,
        func: Callable[..., Any],
        user_id: str,
        params: dict[str, Any],
    ) -> str:
        """Schedule ``func(params)`` once and return the job id."""
        job_id = str(uuid.uuid4())
        self.queue.enqueue(
            func,
            params,
            job_id=job_id,
            retry=self._retry(),
            result_ttl=self.result_ttl,
            meta={"user_id": user_id},
            description=f"{func.__name__} for {user_id}",
        )
        logger.info(
            "job_enqueued",
            action="job_enqueued",
            job_id=job_id,
            job=func.__name__,
            queue=self.queue.name,
            user_id=user_id,
        )
        return job_id


__all__ = ["Enqueuer"]
