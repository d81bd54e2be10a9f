"""Connection checks for the job queue backing store."""

from __future__ import annotations

import redis
from rq import Queue
from rq.worker import Worker

from mailupselling.core.exceptions import MailUpsellingException


class ValidationError(MailUpsellingException):
    """Raised when validation fails (Redis connection, RQ workers)."""

    pass


def validate_redis(redis_url: str) -> None:
    """
    Validate Redis connection.
    Required for the feedback job queue.

    Args:
        redis_url: Redis connection URL (e.g. redis://localhost:6379/0).

    Raises:
        ValidationError: If connection fails.
    """
    try:
        client = redis.Redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
        )
        client.ping()
        client.close()
    except redis.RedisError as e:
        raise ValidationError(
            f"Redis validation failed\n"
            f"  Connection: FAILED\n"
            f"  Error: {e}\n"
            f"  Setup: Run 'docker compose up -d redis' or ensure Redis is running\n"
            f"  URL: {redis_url}",
            original_error=e,
        ) from e


def validate_rq_workers(redis_url: str, queue_name: str) -> None:
    """
    Validate that at least one RQ worker is listening to the feedback queue.

    Jobs enqueued without workers will never be processed.

    Args:
        redis_url: Redis connection URL (e.g. redis://localhost:6379/0).
        queue_name: RQ queue name to check.

    Raises:
        ValidationError: If no workers are listening to the queue.
    """
    try:
        conn = redis.Redis.from_url(redis_url, socket_connect_timeout=5)
        queue = Queue(queue_name, connection=conn)
        count = Worker.count(queue=queue)
        conn.close()
    except redis.RedisError as e:
        raise ValidationError(
            f"RQ worker validation failed\n"
            f"  Error: {e}\n"
            f"  URL: {redis_url}",
            original_error=e,
        ) from e
    if count < 1:
        raise ValidationError(
            f"RQ worker validation failed\n"
            f"  Workers listening to '{queue_name}': 0\n"
            f"  Setup: Start a feedback worker in a separate terminal:\n"
            f"    mailupselling-worker --queue {queue_name}\n"
            f"  Jobs will queue but never process until a worker is running."
        )


__all__ = ["ValidationError", "validate_redis", "validate_rq_workers"]
