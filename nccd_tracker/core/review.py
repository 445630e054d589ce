"""
Review stage - records a reviewer's decision on one evidence link.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidInput
from .models import REVIEW_STATUSES
from .store import RecordStore
from ..util.logging import logger


@dataclass
class ReviewOutcome:
    message: str
    updated: bool


def review_link(store: RecordStore,
                adjustment_id: Optional[str],
                evidence_id: Optional[str],
                status: Optional[str]) -> ReviewOutcome:
    """Set the status of the link between an adjustment and an evidence item.

    Reviewing a pair with no link still succeeds; ``updated`` is False and
    the store is left unchanged.
    """
    if not adjustment_id or not evidence_id or not status:
        raise InvalidInput("adjustmentId, evidenceId, and status are required")

    if status not in REVIEW_STATUSES:
        raise InvalidInput('Status must be either "accepted" or "rejected"')

    updated = store.update_link_status(adjustment_id, evidence_id, status)
    logger.log_review_decision(adjustment_id, evidence_id, status, updated)
    if not updated:
        logger.warning(f"No evidence link for {adjustment_id}/{evidence_id}; review ignored")

    return ReviewOutcome(message=f"Evidence link {status} successfully", updated=updated)
