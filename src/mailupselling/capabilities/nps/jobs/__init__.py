"""NPS feedback job encoding, enqueueing and worker helpers."""

from mailupselling.capabilities.nps.jobs.params import Keys, decode_params, encode_params
from mailupselling.capabilities.nps.jobs.worker import (
    NPSFeedbackWorker,
    WorkResult,
    process_nps_feedback_job,
)
from mailupselling.capabilities.nps.jobs.repository import QueueNPSFeedbackRepository

__all__ = [
    "Keys",
    "NPSFeedbackWorker",
    "QueueNPSFeedbackRepository",
    "WorkResult",
    "decode_params",
    "encode_params",
    "process_nps_feedback_job",
]
