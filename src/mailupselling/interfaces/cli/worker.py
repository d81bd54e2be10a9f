"""Run an RQ worker that delivers queued NPS feedback."""

from __future__ import annotations

import argparse
import sys

import redis
from rq import Worker

from mailupselling.config.exceptions import ConfigError
from mailupselling.config.settings import load_settings
from mailupselling.core.validation import ValidationError, validate_redis
from mailupselling.dependencies import build_queue
from mailupselling.upselling_logging.service_logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deliver queued NPS feedback jobs.")
    parser.add_argument("--queue", help="Queue name (default: NPS_QUEUE_NAME)")
    parser.add_argument("--url", help="Redis URL (default: REDIS_URL)")
    parser.add_argument(
        "--burst",
        action="store_true",
        help="Exit once the queue is empty",
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 2

    updates = {}
    if args.queue:
        updates["nps_queue_name"] = args.queue
    if args.url:
        updates["redis_url"] = args.url
    if updates:
        settings = settings.model_copy(update=updates)

    configure_logging(args.log_level or settings.log_level, use_json=settings.log_json)

    try:
        validate_redis(settings.redis_url)
    except ValidationError as exc:
        logger.error("nps_worker_redis_unavailable", action="nps_worker_start", error=str(exc))
        return 1

    connection = redis.Redis.from_url(settings.redis_url)
    queue = build_queue(settings, connection)
    logger.info(
        "nps_worker_listening",
        action="nps_worker_listening",
        queue=queue.name,
        burst=args.burst,
    )
    Worker([queue], connection=connection).work(burst=args.burst, with_scheduler=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
