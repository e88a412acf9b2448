from __future__ import annotations

"""FastAPI application entrypoint for the document search demo service."""

import hashlib
import logging
import uuid

from fastapi import FastAPI, File, HTTPException, Query, Request, Response, UploadFile

from src.app.dependencies import get_audit_store, get_document_store, get_search_engine
from src.app.metrics import metrics_middleware, metrics_response, observe_search
from src.app.schemas import (
    DocumentCreate,
    DocumentOut,
    DocumentUpdate,
    SearchResultOut,
    StatsResponse,
    SummarizeRequest,
    SummaryResponse,
)
from src.app.settings import settings
from src.loaders.uploads import (
    ExtractedUpload,
    UnsupportedFileTypeError,
    extract_upload,
    format_file_size,
)
from src.metadata.audit import AuditEvent
from src.search.summarizer import summarize_document
from src.search.types import Document
from src.store.inmemory import DocumentNotFoundError

logger = logging.getLogger(__name__)

app = FastAPI(title="Document Search Demo", version="0.1.0")


def _configure_logging() -> None:
    """Configure root logging using environment settings."""
    level_name = settings.log_level.strip().upper()
    level = getattr(logging, level_name, logging.INFO)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
    logger.setLevel(level)


_configure_logging()


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", str(uuid.uuid4()))


def _record_audit_event(event: AuditEvent) -> None:
    """Persist an audit event if an audit store is configured."""
    audit_store = get_audit_store()
    if not audit_store:
        return
    audit_store.record_event(event)


def _safe_error_message(exc: Exception) -> str:
    """Return a safe error type name for logs and responses."""
    return type(exc).__name__


def _document_out(document: Document) -> DocumentOut:
    return DocumentOut(
        doc_id=document.doc_id,
        name=document.name,
        content_type=document.content_type,
        size=document.size,
        size_label=format_file_size(document.size),
        content=document.content,
        uploaded_at=document.uploaded_at,
    )


def _get_or_404(doc_id: str) -> Document:
    try:
        return get_document_store().get_document(doc_id)
    except DocumentNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Document not found") from exc


async def _read_upload_bytes(upload: UploadFile, max_bytes: int | None) -> bytes:
    """Stream upload bytes with a hard size limit."""
    if not max_bytes or max_bytes <= 0:
        return await upload.read()
    buffer = bytearray()
    while True:
        chunk = await upload.read(65536)
        if not chunk:
            break
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            raise HTTPException(
                status_code=400,
                detail=f"File exceeds maximum size of {max_bytes} bytes",
            )
    return bytes(buffer)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Attach or create a request ID for traceability."""
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.middleware("http")
async def record_metrics(request: Request, call_next):
    """Capture request metrics before returning the response."""
    return await metrics_middleware(request, call_next)


@app.get("/metrics")
async def metrics():
    """Expose Prometheus-style metrics."""
    return metrics_response()


@app.get("/health")
async def health() -> dict[str, str]:
    """Simple health probe for uptime checks."""
    return {"status": "ok"}


@app.get("/api/stats", response_model=StatsResponse)
async def stats() -> StatsResponse:
    """Return document counts for the store."""
    return StatsResponse(**get_document_store().stats())


@app.get("/api/documents", response_model=list[DocumentOut])
async def list_documents(
    content_type: str | None = Query(default=None, alias="type"),
) -> list[DocumentOut]:
    """List stored documents, optionally filtered by type."""
    documents = get_document_store().list_documents(content_type=content_type)
    return [_document_out(doc) for doc in documents]


@app.get("/api/documents/{doc_id}", response_model=DocumentOut)
async def get_document(doc_id: str) -> DocumentOut:
    return _document_out(_get_or_404(doc_id))


@app.post("/api/documents", response_model=DocumentOut, status_code=201)
async def create_document(request: DocumentCreate, http_request: Request) -> DocumentOut:
    """Create a document from already-extracted fields."""
    document = get_document_store().add_document(
        name=request.name,
        content_type=request.content_type,
        size=request.size,
        content=request.content,
    )
    _record_audit_event(
        AuditEvent(
            event_type="create",
            request_id=_request_id(http_request),
            status="completed",
            document_id=document.doc_id,
            detail={"content_type": document.content_type, "size": document.size},
        )
    )
    logger.info(
        "document_created",
        extra={"request_id": _request_id(http_request), "doc_id": document.doc_id},
    )
    return _document_out(document)


@app.post("/api/documents/upload", response_model=list[DocumentOut], status_code=201)
async def upload_documents(
    http_request: Request,
    files: list[UploadFile] = File(...),
) -> list[DocumentOut]:
    """Store uploaded files as documents."""
    if not files:
        raise HTTPException(status_code=400, detail="No files provided")
    request_id = _request_id(http_request)
    extracted: list[ExtractedUpload] = []
    for idx, upload in enumerate(files, start=1):
        filename = upload.filename or f"upload-{idx}.txt"
        try:
            data = await _read_upload_bytes(upload, settings.max_upload_bytes)
            extracted.append(extract_upload(filename, data))
        except (HTTPException, UnsupportedFileTypeError) as exc:
            detail = exc.detail if isinstance(exc, HTTPException) else str(exc)
            _record_audit_event(
                AuditEvent(
                    event_type="upload",
                    request_id=request_id,
                    status="failed",
                    detail={"filename": filename, "error": _safe_error_message(exc)},
                )
            )
            logger.error(
                "file_upload_failed",
                extra={"request_id": request_id, "upload_name": filename, "detail": detail},
            )
            if isinstance(exc, HTTPException):
                raise
            raise HTTPException(status_code=400, detail=detail) from exc

    store = get_document_store()
    created: list[Document] = []
    for item in extracted:
        document = store.add_document(
            name=item.name,
            content_type=item.content_type,
            size=item.size,
            content=item.content,
        )
        created.append(document)
        _record_audit_event(
            AuditEvent(
                event_type="upload",
                request_id=request_id,
                status="completed",
                document_id=document.doc_id,
                detail={"filename": item.name, "size": item.size},
            )
        )
    logger.info(
        "files_uploaded",
        extra={
            "request_id": request_id,
            "count": len(created),
            "bytes": sum(doc.size for doc in created),
        },
    )
    return [_document_out(doc) for doc in created]


@app.patch("/api/documents/{doc_id}", response_model=DocumentOut)
async def update_document(doc_id: str, request: DocumentUpdate) -> DocumentOut:
    """Apply a partial update to a document."""
    changes = request.model_dump(exclude_unset=True)
    for key in ("name", "content_type", "size"):
        if changes.get(key, "") is None:
            changes.pop(key)
    try:
        document = get_document_store().update_document(doc_id, **changes)
    except DocumentNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Document not found") from exc
    return _document_out(document)


@app.delete("/api/documents/{doc_id}", status_code=204)
async def delete_document(doc_id: str, http_request: Request) -> Response:
    """Remove a document from the store."""
    deleted = get_document_store().delete_document(doc_id)
    _record_audit_event(
        AuditEvent(
            event_type="delete",
            request_id=_request_id(http_request),
            status="completed" if deleted else "not_found",
            document_id=doc_id,
        )
    )
    if not deleted:
        raise HTTPException(status_code=404, detail="Document not found")
    return Response(status_code=204)


@app.get("/api/search", response_model=list[SearchResultOut])
async def search(
    http_request: Request,
    q: str | None = Query(default=None),
    semantic: bool = True,
    content_type: str | None = Query(default=None, alias="type"),
) -> list[SearchResultOut]:
    """Rank documents against a keyword query."""
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query cannot be empty")
    request_id = _request_id(http_request)
    documents = get_document_store().list_documents(content_type=content_type)
    results = get_search_engine().search(documents, q, semantic=semantic)
    observe_search(len(results), semantic)
    query_hash = hashlib.sha256(q.encode("utf-8")).hexdigest()
    logger.info(
        "search_completed",
        extra={
            "request_id": request_id,
            "query_hash": query_hash,
            "query_length": len(q),
            "semantic": semantic,
            "content_type": content_type,
            "candidates": len(documents),
            "results": len(results),
        },
    )
    _record_audit_event(
        AuditEvent(
            event_type="search",
            request_id=request_id,
            status="completed",
            detail={"query_hash": query_hash, "semantic": semantic, "results": len(results)},
        )
    )
    return [
        SearchResultOut(
            document=_document_out(result.document),
            relevance_score=result.relevance_score,
            matched_snippet=result.matched_snippet,
        )
        for result in results
    ]


@app.post("/api/documents/{doc_id}/summarize", response_model=SummaryResponse)
async def summarize(
    doc_id: str,
    http_request: Request,
    request: SummarizeRequest | None = None,
) -> SummaryResponse:
    """Return a canned summary for a stored document."""
    options = request or SummarizeRequest()
    document = _get_or_404(doc_id)
    summary = summarize_document(document, length=options.length, focus=options.focus)
    _record_audit_event(
        AuditEvent(
            event_type="summarize",
            request_id=_request_id(http_request),
            status="completed",
            document_id=doc_id,
            detail={"length": options.length, "focus": options.focus},
        )
    )
    return SummaryResponse(
        document_id=doc_id,
        title=summary.title,
        file_type=summary.file_type,
        pages=summary.pages,
        focus=summary.focus,
        points=summary.points,
        themes=summary.themes,
    )
