"""Wiring helpers for the queue-backed feedback pipeline."""

from __future__ import annotations

import redis
from rq import Queue

from mailupselling.capabilities.nps.jobs.repository import QueueNPSFeedbackRepository
from mailupselling.config.settings import Settings
from mailupselling.core.enqueuer import Enqueuer


def build_queue(settings: Settings, connection: redis.Redis | None = None) -> Queue:
    """Return the RQ queue feedback jobs are placed on."""
    conn = connection or redis.Redis.from_url(
        settings.redis_url,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
    )
    return Queue(settings.nps_queue_name, connection=conn)


def build_repository(
    settings: Settings, connection: redis.Redis | None = None
) -> QueueNPSFeedbackRepository:
    """Return a repository that enqueues onto the configured feedback queue."""
    enqueuer = Enqueuer(
        build_queue(settings, connection),
        max_retries=settings.nps_job_max_retries,
        retry_intervals=settings.nps_job_retry_intervals,
        result_ttl=settings.nps_job_result_ttl,
    )
    return QueueNPSFeedbackRepository(enqueuer)


__all__ = ["build_queue", "build_repository"]
