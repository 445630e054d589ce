"""
Summary stage - derives the NCCD compliance report from current store state.
"""

import math
from typing import Any, Dict, List, Optional

from .latency import SimulatedLatency
from .models import (
    Adjustment,
    Evidence,
    EvidenceLink,
    EXTENSIVE,
    LINK_ACCEPTED,
    QDTP,
    QUALITY_STRONG,
    SUBSTANTIAL,
    SUPPLEMENTARY,
)
from .store import RecordStore
from .students import Student
from ..util.logging import logger

DEFAULT_STUDENT_ID = "STUDENT-001"
MAX_NEXT_STEPS = 5

BASELINE_NEXT_STEPS = [
    "Continue documenting student progress with regular observations and assessments",
    "Collect additional evidence for adjustments with lower confidence scores",
    "Review and update adjustment strategies based on student response data",
    "Ensure all staff involved are documenting their implementation consistently",
]
LOW_CONFIDENCE_STEP = "Focus on gathering stronger evidence to improve overall confidence"
MISSING_EVIDENCE_STEP = "Address missing evidence areas identified in this report"

UNLINKED_ADJUSTMENTS = "Some adjustments lack supporting evidence documentation"
TOO_FEW_STRONG = "Additional high-quality evidence needed for stronger compliance"
NO_ASSESSMENT = "Assessment-based evidence would strengthen the case"

COMPLIANCE_RECOMMENDATIONS = [
    "Maintain detailed records of all adjustment implementations",
    "Continue regular progress monitoring and documentation",
    "Ensure evidence collection covers all adjustment categories",
    "Review and update adjustments based on student progress data",
    "Collaborate with specialists to strengthen intervention strategies",
]


def accepted_links(links: List[EvidenceLink]) -> List[EvidenceLink]:
    return [l for l in links if l.status == LINK_ACCEPTED]


def overall_confidence(accepted: List[EvidenceLink]) -> int:
    """Mean confidence of accepted links, rounded half up; 0 when none are accepted."""
    if not accepted:
        return 0
    mean = sum(l.confidence for l in accepted) / len(accepted)
    return int(math.floor(mean + 0.5))


def compliance_level(adjustments: List[Adjustment]) -> str:
    """Highest NCCD level present among the adjustments, QDTP by default."""
    levels = {a.nccd_level_indicator for a in adjustments}
    for level in (EXTENSIVE, SUBSTANTIAL, SUPPLEMENTARY):
        if level in levels:
            return level
    return QDTP


def missing_evidence(adjustments: List[Adjustment], evidence: List[Evidence],
                     accepted: List[EvidenceLink]) -> List[str]:
    missing = []
    if len(accepted) < len(adjustments):
        missing.append(UNLINKED_ADJUSTMENTS)
    if len([l for l in accepted if l.evidence_quality == QUALITY_STRONG]) < 2:
        missing.append(TOO_FEW_STRONG)
    if not any(e.category == "Assessment" for e in evidence):
        missing.append(NO_ASSESSMENT)
    return missing


def next_steps(confidence: int, missing: List[str]) -> List[str]:
    """Baseline steps, adjusted for confidence and gaps, capped at five.

    The urgent step is prepended before the cap is applied, so with low
    confidence the missing-evidence step is always cut.
    """
    steps = list(BASELINE_NEXT_STEPS)
    if confidence < 70:
        steps.insert(0, LOW_CONFIDENCE_STEP)
    if len(missing) > 2:
        steps.append(MISSING_EVIDENCE_STEP)
    return steps[:MAX_NEXT_STEPS]


def justification(level: str, confidence: int) -> str:
    return (
        f"Based on current evidence and adjustments, this student qualifies for {level} level support. "
        f"The evidence demonstrates consistent need for specialized interventions with "
        f"{confidence}% confidence in documentation quality."
    )


def generate_summary(store: RecordStore,
                     latency: Optional[SimulatedLatency] = None,
                     student: Optional[Student] = None) -> Dict[str, Any]:
    """Build the teacher summary report from a snapshot of the store."""
    snapshot = store.get_all()

    latency = latency or SimulatedLatency.disabled()
    latency.summary()

    accepted = accepted_links(snapshot.links)
    confidence = overall_confidence(accepted)
    level = compliance_level(snapshot.adjustments)
    missing = missing_evidence(snapshot.adjustments, snapshot.evidence, accepted)

    report: Dict[str, Any] = {
        "studentId": student.student_id if student else DEFAULT_STUDENT_ID,
        "adjustments": [a.to_dict() for a in snapshot.adjustments],
        "linkedEvidence": [l.to_dict() for l in snapshot.links],
        "overallConfidence": confidence,
        "missingEvidence": missing,
        "suggestedNextSteps": next_steps(confidence, missing),
        "nccdCompliance": {
            "level": level,
            "justification": justification(level, confidence),
            "recommendations": list(COMPLIANCE_RECOMMENDATIONS),
        },
    }
    if student:
        report["student"] = student.to_dict()

    logger.log_summary(report["studentId"], level, confidence, len(missing),
                       details={"accepted_links": len(accepted)})
    return report
