"""
Record store - process-lifetime holder of adjustments, evidence and links.

The store is constructed explicitly and handed to each stage. All mutations
and snapshots run under one lock so concurrent requests on the FastAPI
thread pool cannot interleave a compound read-modify-write.
"""

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from .models import Adjustment, Evidence, EvidenceLink


@dataclass
class StoreSnapshot:
    """Point-in-time copy of the three collections."""

    adjustments: List[Adjustment]
    evidence: List[Evidence]
    links: List[EvidenceLink]

    def to_dict(self) -> Dict[str, List[Dict]]:
        return {
            "adjustments": [a.to_dict() for a in self.adjustments],
            "evidence": [e.to_dict() for e in self.evidence],
            "links": [l.to_dict() for l in self.links],
        }


class RecordStore:
    """In-memory store for the lifetime of the serving process."""

    def __init__(self):
        self._lock = threading.Lock()
        self._adjustments: List[Adjustment] = []
        self._evidence: List[Evidence] = []
        self._links: List[EvidenceLink] = []

    def append_adjustments(self, items: Iterable[Adjustment]) -> None:
        items = list(items)
        with self._lock:
            self._adjustments.extend(items)

    def append_evidence(self, items: Iterable[Evidence]) -> None:
        items = list(items)
        with self._lock:
            self._evidence.extend(items)

    def append_links(self, items: Iterable[EvidenceLink]) -> None:
        items = list(items)
        with self._lock:
            self._links.extend(items)

    def get_all(self) -> StoreSnapshot:
        """Snapshot of all three collections.

        The lists are copies, but the records themselves are shared; a later
        status update is visible through a link taken from an older snapshot.
        """
        with self._lock:
            return StoreSnapshot(
                adjustments=list(self._adjustments),
                evidence=list(self._evidence),
                links=list(self._links),
            )

    def find_link(self, adjustment_id: str, evidence_id: str) -> Optional[EvidenceLink]:
        """First link matching both ids, or None."""
        with self._lock:
            return self._find_link_locked(adjustment_id, evidence_id)

    def update_link_status(self, adjustment_id: str, evidence_id: str, status: str) -> bool:
        """Overwrite the status of the first link matching both ids.

        Returns False when no link matches; nothing is created in that case.
        """
        with self._lock:
            link = self._find_link_locked(adjustment_id, evidence_id)
            if link is None:
                return False
            link.status = status
            link.reviewed_at = datetime.now().isoformat()
            return True

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {
                "adjustments": len(self._adjustments),
                "evidence": len(self._evidence),
                "links": len(self._links),
            }

    def reset(self) -> Dict[str, int]:
        """Clear all three collections; returns how many records were dropped."""
        with self._lock:
            cleared = {
                "adjustments": len(self._adjustments),
                "evidence": len(self._evidence),
                "links": len(self._links),
            }
            self._adjustments = []
            self._evidence = []
            self._links = []
        return cleared

    def _find_link_locked(self, adjustment_id: str, evidence_id: str) -> Optional[EvidenceLink]:
        for link in self._links:
            if link.adjustment_id == adjustment_id and link.evidence_id == evidence_id:
                return link
        return None
