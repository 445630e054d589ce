"""
Extraction stage - turns submitted text or a file manifest into records.

The analysis is simulated: every call yields exactly one templated record of
the requested kind, whatever the size or content of the input.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from .errors import InvalidInput
from .latency import SimulatedLatency
from .models import Adjustment, Evidence, SUPPLEMENTARY, new_id
from .store import RecordStore
from ..util.logging import logger

LEARNING_PLAN = "Learning Plan"
EVIDENCE = "Evidence"
DOCUMENT_TYPES = [LEARNING_PLAN, EVIDENCE]


def describe_input(text: Optional[str], files: Optional[List[Dict[str, Any]]]) -> str:
    """Content handed to the extractor: the text itself, or a file listing."""
    if text:
        return text
    files = files or []
    names = ", ".join(f.get("name", "") for f in files)
    return f"Processing {len(files)} uploaded files: {names}"


def extract_adjustments(content: str) -> List[Adjustment]:
    """Templated extraction; the content does not change the result."""
    return [
        Adjustment(
            adjustment_id=new_id("adj"),
            description="Extracted adjustment from learning plan",
            category="Curriculum",
            success_criteria="Student will demonstrate improved understanding",
            implementation="Implement differentiated instruction strategies",
            responsible_staff="Classroom Teacher",
            nccd_level_indicator=SUPPLEMENTARY,
            evidence_quotes=["Key quote from document"],
            rationale="Based on student needs assessment",
            confidence=80,
        )
    ]


def extract_evidence(content: str) -> List[Evidence]:
    return [
        Evidence(
            evidence_id=new_id("ev"),
            description="Extracted evidence from document",
            category="Assessment",
            implementation="Applied adjustment in classroom setting",
            outcome="Positive student response observed",
            responsible_staff="Teacher",
            timeline=date.today().isoformat(),
            quality_indicators=["Measurable improvement", "Consistent application"],
            nccd_level_indicator=SUPPLEMENTARY,
            evidence_quotes=["Supporting quote from evidence"],
            rationale="Evidence supports adjustment effectiveness",
            confidence=85,
        )
    ]


def validate_request(document_type: Optional[str], text: Optional[str],
                     files: Optional[List[Dict[str, Any]]]) -> None:
    if not document_type:
        raise InvalidInput("documentType is required")
    if not text and not files:
        raise InvalidInput("Either text or files are required")
    if document_type not in DOCUMENT_TYPES:
        raise InvalidInput("Invalid document type")


def extract_document(store: RecordStore,
                     document_type: Optional[str],
                     text: Optional[str] = None,
                     files: Optional[List[Dict[str, Any]]] = None,
                     latency: Optional[SimulatedLatency] = None) -> Dict[str, Any]:
    """Extract records from a document and append them to the store.

    Returns the extraction envelope: the document type, the extracted
    ``adjustments`` or ``evidence``, the extraction timestamp and, when a file
    list was supplied, the number and names of the files.
    """
    validate_request(document_type, text, files)

    latency = latency or SimulatedLatency.disabled()
    latency.extraction(len(files) if files is not None else None)

    content = describe_input(text, files)
    envelope: Dict[str, Any] = {"documentType": document_type}

    if document_type == LEARNING_PLAN:
        adjustments = extract_adjustments(content)
        store.append_adjustments(adjustments)
        envelope["adjustments"] = [a.to_dict() for a in adjustments]
        record_ids = [a.adjustment_id for a in adjustments]
    else:
        evidence = extract_evidence(content)
        store.append_evidence(evidence)
        envelope["evidence"] = [e.to_dict() for e in evidence]
        record_ids = [e.evidence_id for e in evidence]

    envelope["extractedAt"] = datetime.now().isoformat()
    if files is not None:
        envelope["filesProcessed"] = len(files)
        envelope["fileNames"] = [f.get("name", "") for f in files]

    logger.log_extraction(document_type, record_ids, files_processed=len(files or []))
    return envelope
