"""
Structured logging for tracker operations.
Extraction, linking, review and summary events are logged as single-line
operation records so they can be grepped and audited.
"""

import logging
from typing import Any, Dict, List


def _truncate(value: str, limit: int = 50) -> str:
    return value[:limit] + "..." if len(value) > limit else value


class StructuredLogger:
    """Structured logger for extraction, linking, review and summary operations."""

    def __init__(self, name: str = "nccd_tracker"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.info(message)

    def log_extraction(self, document_type: str, record_ids: List[str], files_processed: int = 0,
                       status: str = "success"):
        """Log a document extraction."""
        details = {
            "document_type": document_type,
            "record_ids": record_ids,
            "files_processed": files_processed,
        }
        self.log_operation("extract", status, details)

    def log_link_generation(self, adjustments: int, evidence: int, links_created: int,
                            scorer: str, status: str = "success"):
        """Log a link generation pass over the adjustment x evidence cross product."""
        details = {
            "adjustments": adjustments,
            "evidence": evidence,
            "pairs": adjustments * evidence,
            "links_created": links_created,
            "scorer": scorer,
        }
        self.log_operation("link.generate", status, details)

    def log_review_decision(self, adjustment_id: str, evidence_id: str, decision: str, updated: bool):
        """Log a reviewer decision on an evidence link."""
        details = {
            "adjustment_id": adjustment_id,
            "evidence_id": evidence_id,
            "decision": decision,
            "updated": updated,
        }
        status = decision if updated else "no_match"
        self.log_operation("link.review", status, details)

    def log_summary(self, student_id: str, level: str, overall_confidence: int,
                    missing_count: int, details: Dict[str, Any] = None):
        """Log summary report generation."""
        log_details = {
            "student_id": student_id,
            "level": level,
            "overall_confidence": overall_confidence,
            "missing_evidence": missing_count,
        }
        if details:
            log_details.update(details)

        self.log_operation("summary.generate", "success", log_details)

    def log_store_reset(self, cleared: Dict[str, int], requester: str = "api"):
        """Log a full store reset."""
        log_details = dict(cleared)
        log_details["requester"] = requester
        self.log_operation("store.reset", "success", log_details)

    def log_request_error(self, operation: str, error: Exception, payload: Dict[str, Any] = None):
        """Log a failed request with sanitized payload details."""
        details = {"error_type": type(error).__name__, "error": _truncate(str(error), 100)}
        if payload:
            details["payload"] = sanitize_payload(payload)
        self.log_operation(operation, "failed", details)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()


def sanitize_payload(payload: Any) -> Any:
    """Truncate free text in payloads before they are written to the log."""
    if isinstance(payload, dict):
        return {k: sanitize_payload(v) for k, v in payload.items()}
    elif isinstance(payload, str):
        return _truncate(payload, 100)
    elif isinstance(payload, list):
        return [sanitize_payload(item) for item in payload]
    else:
        return payload
