"""
HTTP API for the evidence tracker.

Every endpoint answers with either its success payload or {"error": message}
and the matching status code. The store, latency settings and link scorer
live on app.state so tests can build an app around their own instances.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .schemas import (
    ExtractRequest,
    HealthResponse,
    LinkRequest,
    LinkResponse,
    ResetResponse,
    ReviewRequest,
    ReviewResponse,
    SummaryRequest,
)
from ..core import config
from ..core.errors import Forbidden, InvalidInput, NotFound, TrackerError, UnexpectedError
from ..core.extraction import extract_document
from ..core.latency import SimulatedLatency
from ..core.linking import ILinkScorer, RandomLinkScorer, generate_links
from ..core.models import Adjustment, Evidence
from ..core.review import review_link
from ..core.stats import compute_stats
from ..core.store import RecordStore
from ..core.students import get_student, list_students
from ..core.summary import generate_summary
from ..util.logging import logger

router = APIRouter()


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_latency(request: Request) -> SimulatedLatency:
    return request.app.state.latency


def get_scorer(request: Request) -> ILinkScorer:
    return request.app.state.scorer


@router.get("/health", response_model=HealthResponse)
def health_check_endpoint(store: RecordStore = Depends(get_store)):
    """Check service health."""
    counts = store.counts()
    return HealthResponse(status="healthy", version=config.VERSION, **counts)


@router.get("/api/data")
def get_data_endpoint(store: RecordStore = Depends(get_store)):
    """All adjustments, evidence and links currently held."""
    try:
        return store.get_all().to_dict()
    except Exception as e:
        logger.log_request_error("data.fetch", e)
        raise UnexpectedError("Failed to fetch data") from e


@router.post("/api/extract")
def extract_endpoint(request: ExtractRequest,
                     store: RecordStore = Depends(get_store),
                     latency: SimulatedLatency = Depends(get_latency)):
    """Extract adjustments or evidence from submitted text or files."""
    files = None
    if request.files is not None:
        files = [f.model_dump() for f in request.files]

    try:
        return extract_document(
            store,
            document_type=request.document_type,
            text=request.text,
            files=files,
            latency=latency,
        )
    except TrackerError:
        raise
    except Exception as e:
        logger.log_request_error("extract", e, {"documentType": request.document_type})
        raise UnexpectedError("Failed to extract data") from e


@router.post("/api/link", response_model=LinkResponse)
def link_endpoint(request: LinkRequest,
                  store: RecordStore = Depends(get_store),
                  latency: SimulatedLatency = Depends(get_latency),
                  scorer: ILinkScorer = Depends(get_scorer)):
    """Propose evidence links across the submitted adjustments and evidence."""
    try:
        adjustments = [Adjustment.from_dict(a) for a in request.adjustments or []]
        evidence = [Evidence.from_dict(e) for e in request.evidence or []]
        links = generate_links(store, adjustments, evidence, scorer=scorer, latency=latency)
    except TrackerError:
        raise
    except Exception as e:
        logger.log_request_error("link.generate", e)
        raise UnexpectedError("Failed to generate links") from e

    return LinkResponse(
        success=True,
        links=[l.to_dict() for l in links],
        message=f"Generated {len(links)} evidence links",
    )


@router.post("/api/review", response_model=ReviewResponse)
def review_endpoint(request: ReviewRequest, store: RecordStore = Depends(get_store)):
    """Accept or reject the link between an adjustment and an evidence item."""
    try:
        outcome = review_link(store, request.adjustment_id, request.evidence_id, request.status)
    except TrackerError:
        raise
    except Exception as e:
        logger.log_request_error("link.review", e)
        raise UnexpectedError("Failed to update review status") from e

    return ReviewResponse(success=True, message=outcome.message)


@router.post("/api/summary")
def summary_endpoint(request: Optional[SummaryRequest] = Body(default=None),
                     store: RecordStore = Depends(get_store),
                     latency: SimulatedLatency = Depends(get_latency)):
    """Compliance summary for the current store contents."""
    student = None
    if request is not None and request.student_id:
        student = get_student(request.student_id)
        if student is None:
            raise InvalidInput(f"Unknown studentId: {request.student_id}")

    try:
        return generate_summary(store, latency=latency, student=student)
    except TrackerError:
        raise
    except Exception as e:
        logger.log_request_error("summary.generate", e)
        raise UnexpectedError("Failed to generate summary") from e


@router.get("/api/stats")
def stats_endpoint(store: RecordStore = Depends(get_store)):
    """Dashboard counters and review progress."""
    return compute_stats(store, total_students=len(list_students()))


@router.get("/api/students")
def list_students_endpoint():
    students = list_students()
    return {"students": [s.to_dict() for s in students], "count": len(students)}


@router.get("/api/students/{student_id}")
def get_student_endpoint(student_id: str):
    student = get_student(student_id)
    if student is None:
        raise NotFound("Student not found")
    return student.to_dict()


@router.post("/api/reset", response_model=ResetResponse)
def reset_endpoint(store: RecordStore = Depends(get_store)):
    """Clear every record (debug mode only)."""
    if not config.debug_enabled():
        raise Forbidden("Reset endpoint requires debug mode")

    cleared = store.reset()
    logger.log_store_reset(cleared)
    return ResetResponse(success=True, cleared=cleared)


async def tracker_error_handler(request: Request, exc: TrackerError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {location}: {first.get('msg')}" if location else f"Invalid request: {first.get('msg')}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(f"Unhandled exception: {exc}")
    content = {"error": "Internal server error"}
    if config.debug_enabled():
        content["debug"] = str(exc)
    return JSONResponse(status_code=500, content=content)


def create_app(store: Optional[RecordStore] = None,
               latency: Optional[SimulatedLatency] = None,
               scorer: Optional[ILinkScorer] = None) -> FastAPI:
    """Build the API around the given collaborators, defaulting to config values."""
    app = FastAPI(
        title="NCCD Evidence Tracker API",
        version=config.VERSION,
        description="Adjustment and evidence tracking with link review and compliance summaries",
        docs_url="/docs" if config.debug_enabled() else None,
        redoc_url="/redoc" if config.debug_enabled() else None,
    )

    app.state.store = store if store is not None else RecordStore()
    app.state.latency = latency if latency is not None else SimulatedLatency.from_config()
    app.state.scorer = scorer if scorer is not None else RandomLinkScorer(seed=config.get_link_seed())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TrackerError, tracker_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(router)
    return app


app = create_app()
