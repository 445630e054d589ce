"""
Dashboard statistics and student roster tests.
"""

from nccd_tracker.core.models import EvidenceLink, quality_for
from nccd_tracker.core.stats import compute_stats
from nccd_tracker.core.store import RecordStore
from nccd_tracker.core.students import get_student, list_students


def make_link(evidence_id: str, confidence: int, status: str) -> EvidenceLink:
    return EvidenceLink(
        link_id=f"link-{evidence_id}",
        adjustment_id="adj-1",
        evidence_id=evidence_id,
        confidence=confidence,
        evidence_quality=quality_for(confidence),
        connections=["x", "y"],
        missing_elements=[],
        nccd_relevance="",
        status=status,
    )


def test_empty_store_stats():
    stats = compute_stats(RecordStore(), total_students=5)

    assert stats["totalStudents"] == 5
    assert stats["totalLinks"] == 0
    assert stats["completionRate"] == 0
    assert stats["averageConfidence"] == 0
    assert "lastUpdate" in stats


def test_review_progress():
    store = RecordStore()
    store.append_links([
        make_link("ev-1", 90, "accepted"),
        make_link("ev-2", 65, "rejected"),
        make_link("ev-3", 70, "pending"),
    ])

    stats = compute_stats(store)

    assert stats["totalLinks"] == 3
    assert stats["pendingReviews"] == 1
    assert stats["approvedLinks"] == 1
    assert stats["rejectedLinks"] == 1
    assert stats["completionRate"] == 67
    assert stats["averageConfidence"] == 75


def test_roster():
    students = list_students()

    assert len(students) == 5
    assert students[0].student_id == "std-001"
    assert get_student("std-003").has_nccd_funding is False
    assert get_student("std-999") is None


def test_student_wire_format():
    data = get_student("std-005").to_dict()

    assert data["class"] == "6B"
    assert data["hasNCCDFunding"] is True
    assert data["disabilities"] == ["Physical Disability", "Vision Impairment"]
