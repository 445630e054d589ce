"""
Dashboard statistics over the record store.
"""

import math
from datetime import datetime
from typing import Any, Dict

from .models import LINK_ACCEPTED, LINK_PENDING, LINK_REJECTED
from .store import RecordStore


def _percent(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    return int(math.floor(part * 100 / whole + 0.5))


def compute_stats(store: RecordStore, total_students: int = 0) -> Dict[str, Any]:
    """Counts, review progress and average link confidence.

    Accepted links are reported as ``approvedLinks``; the review workflow
    only ever writes "accepted" or "rejected".
    """
    snapshot = store.get_all()
    links = snapshot.links

    pending = len([l for l in links if l.status == LINK_PENDING])
    accepted = len([l for l in links if l.status == LINK_ACCEPTED])
    rejected = len([l for l in links if l.status == LINK_REJECTED])

    if links:
        mean = sum(l.confidence for l in links) / len(links)
        average_confidence = int(math.floor(mean + 0.5))
    else:
        average_confidence = 0

    return {
        "totalStudents": total_students,
        "totalAdjustments": len(snapshot.adjustments),
        "totalEvidence": len(snapshot.evidence),
        "totalLinks": len(links),
        "pendingReviews": pending,
        "approvedLinks": accepted,
        "rejectedLinks": rejected,
        "completionRate": _percent(accepted + rejected, len(links)),
        "averageConfidence": average_confidence,
        "lastUpdate": datetime.now().isoformat(),
    }
