"""
Review stage tests - input validation and status updates by composite key.
"""

import pytest

from nccd_tracker.core.errors import InvalidInput
from nccd_tracker.core.models import EvidenceLink
from nccd_tracker.core.review import review_link
from nccd_tracker.core.store import RecordStore


@pytest.fixture
def store():
    store = RecordStore()
    store.append_links([
        EvidenceLink(
            link_id="link-1",
            adjustment_id="adj-1",
            evidence_id="ev-1",
            confidence=88,
            evidence_quality="Strong",
            connections=["Consistent NCCD level indicators", "Similar implementation approaches"],
            missing_elements=[],
            nccd_relevance="Supports Supplementary level funding justification",
        )
    ])
    return store


@pytest.mark.parametrize("adjustment_id,evidence_id,status", [
    (None, "ev-1", "accepted"),
    ("adj-1", "", "accepted"),
    ("adj-1", "ev-1", None),
])
def test_missing_fields_rejected(store, adjustment_id, evidence_id, status):
    with pytest.raises(InvalidInput, match="adjustmentId, evidenceId, and status are required"):
        review_link(store, adjustment_id, evidence_id, status)


@pytest.mark.parametrize("status", ["approved", "pending", "ACCEPTED"])
def test_invalid_status_rejected(store, status):
    with pytest.raises(InvalidInput, match="Status must be either"):
        review_link(store, "adj-1", "ev-1", status)
    assert store.find_link("adj-1", "ev-1").status == "pending"


def test_accept_updates_link(store):
    outcome = review_link(store, "adj-1", "ev-1", "accepted")

    assert outcome.updated is True
    assert outcome.message == "Evidence link accepted successfully"
    assert store.find_link("adj-1", "ev-1").status == "accepted"


def test_reject_updates_link(store):
    outcome = review_link(store, "adj-1", "ev-1", "rejected")

    assert outcome.message == "Evidence link rejected successfully"
    assert store.find_link("adj-1", "ev-1").status == "rejected"


def test_unknown_pair_succeeds_without_changes(store):
    outcome = review_link(store, "adj-404", "ev-1", "accepted")

    assert outcome.updated is False
    assert outcome.message == "Evidence link accepted successfully"
    links = store.get_all().links
    assert len(links) == 1
    assert links[0].status == "pending"
