"""
Record store tests - append order, snapshots, targeted status updates and reset.
"""

import threading

import pytest

from nccd_tracker.core.models import Adjustment, Evidence, EvidenceLink, SUPPLEMENTARY
from nccd_tracker.core.store import RecordStore


def make_adjustment(adjustment_id: str) -> Adjustment:
    return Adjustment(
        adjustment_id=adjustment_id,
        description="Visual timetable",
        category="Environment",
        success_criteria="Transitions without prompting",
        implementation="Timetable on desk",
        responsible_staff="Classroom Teacher",
        nccd_level_indicator=SUPPLEMENTARY,
        evidence_quotes=[],
        rationale="Routine support",
        confidence=80,
    )


def make_evidence(evidence_id: str) -> Evidence:
    return Evidence(
        evidence_id=evidence_id,
        description="Observation notes",
        category="Observation",
        implementation="Observed during transitions",
        outcome="Fewer prompts needed",
        responsible_staff="Teacher",
        timeline="2024-03-01",
        quality_indicators=[],
        nccd_level_indicator=SUPPLEMENTARY,
        evidence_quotes=[],
        rationale="Direct observation",
        confidence=85,
    )


def make_link(adjustment_id: str, evidence_id: str, link_id: str = None) -> EvidenceLink:
    return EvidenceLink(
        link_id=link_id or f"link-{adjustment_id}-{evidence_id}",
        adjustment_id=adjustment_id,
        evidence_id=evidence_id,
        confidence=90,
        evidence_quality="Strong",
        connections=["Consistent NCCD level indicators", "Similar implementation approaches"],
        missing_elements=[],
        nccd_relevance="Supports Supplementary level funding justification",
    )


@pytest.fixture
def store():
    """Create a fresh store for each test."""
    return RecordStore()


class TestAppend:

    def test_append_preserves_order(self, store):
        store.append_adjustments([make_adjustment("adj-1"), make_adjustment("adj-2")])
        store.append_adjustments([make_adjustment("adj-3")])

        ids = [a.adjustment_id for a in store.get_all().adjustments]
        assert ids == ["adj-1", "adj-2", "adj-3"]

    def test_append_does_not_deduplicate(self, store):
        store.append_evidence([make_evidence("ev-1")])
        store.append_evidence([make_evidence("ev-1")])

        assert len(store.get_all().evidence) == 2

    def test_counts(self, store):
        store.append_adjustments([make_adjustment("adj-1")])
        store.append_evidence([make_evidence("ev-1"), make_evidence("ev-2")])
        store.append_links([make_link("adj-1", "ev-1")])

        assert store.counts() == {"adjustments": 1, "evidence": 2, "links": 1}


class TestSnapshot:

    def test_snapshot_unaffected_by_later_appends(self, store):
        store.append_adjustments([make_adjustment("adj-1")])
        snapshot = store.get_all()

        store.append_adjustments([make_adjustment("adj-2")])

        assert len(snapshot.adjustments) == 1
        assert len(store.get_all().adjustments) == 2

    def test_to_dict_uses_wire_keys(self, store):
        store.append_links([make_link("adj-1", "ev-1")])
        data = store.get_all().to_dict()

        assert set(data.keys()) == {"adjustments", "evidence", "links"}
        link = data["links"][0]
        assert link["adjustmentId"] == "adj-1"
        assert link["evidenceId"] == "ev-1"
        assert link["status"] == "pending"
        assert link["reviewedAt"] is None


class TestUpdateLinkStatus:

    def test_updates_matching_link(self, store):
        store.append_links([make_link("adj-1", "ev-1"), make_link("adj-1", "ev-2")])

        assert store.update_link_status("adj-1", "ev-2", "accepted") is True

        links = store.get_all().links
        assert links[0].status == "pending"
        assert links[1].status == "accepted"
        assert links[1].reviewed_at is not None

    def test_only_first_match_is_updated(self, store):
        store.append_links([
            make_link("adj-1", "ev-1", link_id="link-a"),
            make_link("adj-1", "ev-1", link_id="link-b"),
        ])

        store.update_link_status("adj-1", "ev-1", "rejected")

        statuses = [l.status for l in store.get_all().links]
        assert statuses == ["rejected", "pending"]

    def test_missing_pair_is_a_no_op(self, store):
        store.append_links([make_link("adj-1", "ev-1")])

        assert store.update_link_status("adj-9", "ev-1", "accepted") is False
        assert [l.status for l in store.get_all().links] == ["pending"]
        assert store.counts()["links"] == 1

    def test_rereview_overwrites(self, store):
        store.append_links([make_link("adj-1", "ev-1")])

        store.update_link_status("adj-1", "ev-1", "accepted")
        store.update_link_status("adj-1", "ev-1", "rejected")

        assert store.find_link("adj-1", "ev-1").status == "rejected"

    def test_find_link_missing(self, store):
        assert store.find_link("adj-1", "ev-1") is None


class TestReset:

    def test_reset_clears_everything(self, store):
        store.append_adjustments([make_adjustment("adj-1")])
        store.append_evidence([make_evidence("ev-1")])
        store.append_links([make_link("adj-1", "ev-1")])

        cleared = store.reset()

        assert cleared == {"adjustments": 1, "evidence": 1, "links": 1}
        assert store.counts() == {"adjustments": 0, "evidence": 0, "links": 0}


def test_concurrent_appends_are_not_lost(store):
    """Parallel writers must not lose appends."""
    def writer(prefix):
        for i in range(200):
            store.append_links([make_link(f"{prefix}-{i}", "ev-1")])

    threads = [threading.Thread(target=writer, args=(f"adj{t}",)) for t in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.counts()["links"] == 800
