"""
Linking stage - proposes evidence links across adjustments x evidence.

The decision for each pair sits behind ILinkScorer. The default scorer is a
seeded random placeholder; a text-similarity scorer can replace it without
touching the pipeline, which derives quality, advisories and status itself.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from .errors import InsufficientData
from .latency import SimulatedLatency
from .models import Adjustment, Evidence, EvidenceLink, LINK_PENDING, new_id, quality_for
from .store import RecordStore
from ..util.logging import logger

# Pairs whose draw exceeds this are linked, about 70% of them
LINK_THRESHOLD = 0.3
MIN_CONFIDENCE = 60
MAX_CONFIDENCE = 99

# Advisories attached to links below this confidence
MISSING_ELEMENTS_THRESHOLD = 80
MISSING_ELEMENTS = [
    "Additional quantitative data needed",
    "Longer observation period required",
]


@dataclass
class LinkDecision:
    """A scorer's verdict that a pair should be linked."""

    confidence: int
    connections: List[str]


class ILinkScorer(ABC):
    """Abstract interface for pairwise link scoring."""

    @abstractmethod
    def score(self, adjustment: Adjustment, evidence: Evidence) -> Optional[LinkDecision]:
        """Return a decision for the pair, or None when they should not be linked."""
        pass


def connection_phrases(adjustment: Adjustment, evidence: Evidence) -> List[str]:
    """Candidate rationale phrases for a pair, in selection order."""
    return [
        f"Both relate to {adjustment.category.lower()} adjustments",
        f"Evidence demonstrates {evidence.category.lower()} effectiveness",
        "Consistent NCCD level indicators",
        "Similar implementation approaches",
    ]


class RandomLinkScorer(ILinkScorer):
    """Placeholder scorer drawing link existence, confidence and phrases at random.

    Links roughly 70% of pairs with a uniform integer confidence in [60, 99]
    and the first two to four candidate phrases. Pass ``seed`` for a
    reproducible sequence.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def score(self, adjustment: Adjustment, evidence: Evidence) -> Optional[LinkDecision]:
        if self._rng.random() <= LINK_THRESHOLD:
            return None

        confidence = self._rng.randint(MIN_CONFIDENCE, MAX_CONFIDENCE)
        count = self._rng.randint(2, 4)
        return LinkDecision(
            confidence=confidence,
            connections=connection_phrases(adjustment, evidence)[:count],
        )


def build_link(adjustment: Adjustment, evidence: Evidence, decision: LinkDecision) -> EvidenceLink:
    confidence = max(0, min(100, int(decision.confidence)))
    missing = list(MISSING_ELEMENTS) if confidence < MISSING_ELEMENTS_THRESHOLD else []
    return EvidenceLink(
        link_id=new_id("link"),
        adjustment_id=adjustment.adjustment_id,
        evidence_id=evidence.evidence_id,
        confidence=confidence,
        evidence_quality=quality_for(confidence),
        connections=list(decision.connections),
        missing_elements=missing,
        nccd_relevance=f"Supports {adjustment.nccd_level_indicator} level funding justification",
        status=LINK_PENDING,
    )


def generate_links(store: RecordStore,
                   adjustments: Optional[List[Adjustment]],
                   evidence: Optional[List[Evidence]],
                   scorer: Optional[ILinkScorer] = None,
                   latency: Optional[SimulatedLatency] = None) -> List[EvidenceLink]:
    """Score every (adjustment, evidence) pair and store the resulting links.

    All links are appended in a single store call after scoring finishes, so
    a failure part way through leaves the store untouched.
    """
    if not adjustments or not evidence:
        raise InsufficientData("Adjustments and evidence are required")

    scorer = scorer or RandomLinkScorer()
    latency = latency or SimulatedLatency.disabled()
    latency.linking()

    links = []
    for adjustment in adjustments:
        for item in evidence:
            decision = scorer.score(adjustment, item)
            if decision is not None:
                links.append(build_link(adjustment, item, decision))

    store.append_links(links)

    logger.log_link_generation(
        adjustments=len(adjustments),
        evidence=len(evidence),
        links_created=len(links),
        scorer=type(scorer).__name__,
    )
    return links
