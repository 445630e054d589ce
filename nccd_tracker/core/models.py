"""
Record types for adjustments, evidence items and evidence links.
Records are plain dataclasses; to_dict/from_dict convert to and from the
camelCase wire format used by the HTTP API.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .errors import InvalidInput

QDTP = "Quality Differentiated Teaching Practice"
SUPPLEMENTARY = "Supplementary"
SUBSTANTIAL = "Substantial"
EXTENSIVE = "Extensive"

# Lowest to highest support intensity
NCCD_LEVELS = [QDTP, SUPPLEMENTARY, SUBSTANTIAL, EXTENSIVE]

ADJUSTMENT_CATEGORIES = ["Curriculum", "Assessment", "Environment", "Instruction", "Social"]
ADJUSTMENT_STATUSES = ["active", "completed", "discontinued"]

EVIDENCE_CATEGORIES = ["Assessment", "Observation", "Work Sample", "Photo", "Video", "Report", "Other"]

LINK_PENDING = "pending"
LINK_ACCEPTED = "accepted"
LINK_REJECTED = "rejected"
REVIEW_STATUSES = [LINK_ACCEPTED, LINK_REJECTED]

QUALITY_STRONG = "Strong"
QUALITY_MODERATE = "Moderate"
QUALITY_WEAK = "Weak"


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def now_iso() -> str:
    return datetime.now().isoformat()


def quality_for(confidence: int) -> str:
    """Band a link confidence into an evidence quality label."""
    if confidence >= 85:
        return QUALITY_STRONG
    if confidence >= 70:
        return QUALITY_MODERATE
    return QUALITY_WEAK


def _require(data: Dict[str, Any], key: str, kind: str) -> str:
    value = data.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInput(f"{kind} record is missing '{key}'")
    if not isinstance(value, str):
        raise InvalidInput(f"{kind} '{key}' must be a string, got {value!r}")
    return value


def _one_of(value: str, allowed: List[str], kind: str, key: str) -> str:
    if value not in allowed:
        raise InvalidInput(f"Invalid {kind} {key}: {value}")
    return value


def _confidence(value: Any) -> int:
    try:
        confidence = int(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"confidence must be an integer, got {value!r}")
    if not 0 <= confidence <= 100:
        raise InvalidInput(f"confidence must be between 0 and 100, got {confidence}")
    return confidence


@dataclass
class Adjustment:
    adjustment_id: str
    description: str
    category: str
    success_criteria: str
    implementation: str
    responsible_staff: str
    nccd_level_indicator: str
    evidence_quotes: List[str]
    rationale: str
    confidence: int
    status: str = "active"
    created_at: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "adjustmentId": self.adjustment_id,
            "description": self.description,
            "category": self.category,
            "successCriteria": self.success_criteria,
            "implementation": self.implementation,
            "responsibleStaff": self.responsible_staff,
            "nccdLevelIndicator": self.nccd_level_indicator,
            "evidenceQuotes": list(self.evidence_quotes),
            "rationale": self.rationale,
            "confidence": self.confidence,
            "status": self.status,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Adjustment':
        """Build an adjustment from a client-supplied record.

        Only the id, category and NCCD level are required; the rest fall back
        to empty values so partially populated records can still be linked.
        """
        level = _one_of(_require(data, "nccdLevelIndicator", "Adjustment"),
                        NCCD_LEVELS, "Adjustment", "nccdLevelIndicator")
        # Later records carry the NCCD level in the category slot
        category = _one_of(_require(data, "category", "Adjustment"),
                           ADJUSTMENT_CATEGORIES + NCCD_LEVELS, "Adjustment", "category")
        status = _one_of(data.get("status", "active"), ADJUSTMENT_STATUSES, "Adjustment", "status")
        return cls(
            adjustment_id=_require(data, "adjustmentId", "Adjustment"),
            description=data.get("description", ""),
            category=category,
            success_criteria=data.get("successCriteria", ""),
            implementation=data.get("implementation", ""),
            responsible_staff=data.get("responsibleStaff", ""),
            nccd_level_indicator=level,
            evidence_quotes=list(data.get("evidenceQuotes") or []),
            rationale=data.get("rationale", ""),
            confidence=_confidence(data.get("confidence", 0)),
            status=status,
            created_at=data.get("createdAt") or now_iso(),
        )


@dataclass
class Evidence:
    evidence_id: str
    description: str
    category: str
    implementation: str
    outcome: str
    responsible_staff: str
    timeline: str
    quality_indicators: List[str]
    nccd_level_indicator: str
    evidence_quotes: List[str]
    rationale: str
    confidence: int
    created_at: str = field(default_factory=now_iso)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "evidenceId": self.evidence_id,
            "description": self.description,
            "category": self.category,
            "implementation": self.implementation,
            "outcome": self.outcome,
            "responsibleStaff": self.responsible_staff,
            "timeline": self.timeline,
            "qualityIndicators": list(self.quality_indicators),
            "nccdLevelIndicator": self.nccd_level_indicator,
            "evidenceQuotes": list(self.evidence_quotes),
            "rationale": self.rationale,
            "confidence": self.confidence,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Evidence':
        level = _one_of(_require(data, "nccdLevelIndicator", "Evidence"),
                        NCCD_LEVELS, "Evidence", "nccdLevelIndicator")
        category = _one_of(_require(data, "category", "Evidence"),
                           EVIDENCE_CATEGORIES, "Evidence", "category")
        return cls(
            evidence_id=_require(data, "evidenceId", "Evidence"),
            description=data.get("description", ""),
            category=category,
            implementation=data.get("implementation", ""),
            outcome=data.get("outcome", ""),
            responsible_staff=data.get("responsibleStaff", ""),
            timeline=data.get("timeline", ""),
            quality_indicators=list(data.get("qualityIndicators") or []),
            nccd_level_indicator=level,
            evidence_quotes=list(data.get("evidenceQuotes") or []),
            rationale=data.get("rationale", ""),
            confidence=_confidence(data.get("confidence", 0)),
            created_at=data.get("createdAt") or now_iso(),
        )


@dataclass
class EvidenceLink:
    link_id: str
    adjustment_id: str
    evidence_id: str
    confidence: int
    evidence_quality: str
    connections: List[str]
    missing_elements: List[str]
    nccd_relevance: str
    status: str = LINK_PENDING
    is_match: bool = True
    created_at: str = field(default_factory=now_iso)
    reviewed_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "linkId": self.link_id,
            "adjustmentId": self.adjustment_id,
            "evidenceId": self.evidence_id,
            "isMatch": self.is_match,
            "confidence": self.confidence,
            "connections": list(self.connections),
            "evidenceQuality": self.evidence_quality,
            "missingElements": list(self.missing_elements),
            "nccdRelevance": self.nccd_relevance,
            "status": self.status,
            "createdAt": self.created_at,
            "reviewedAt": self.reviewed_at,
        }
