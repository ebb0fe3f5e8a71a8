import logging
from typing import Annotated
from urllib.parse import quote

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from starlette.concurrency import run_in_threadpool

from csvscope.config import settings
from csvscope.engine import TokenEstimator
from csvscope.errors import AnalysisNotFoundError, MalformedInputError, RejectedInputError
from csvscope.models import AnalysisResponse
from csvscope.service import AnalysisService
from csvscope.store import AnalysisStore
from csvscope.validation import RequestValidator

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

_service: AnalysisService | None = None


def get_service() -> AnalysisService:
    """Build the service from settings on first use."""
    global _service
    if _service is None:
        _service = AnalysisService(
            store=AnalysisStore(settings.storage.path),
            tokens=TokenEstimator.from_encoding_name(settings.tokenizer.encoding),
        )
        log.info("Analysis store: %s", settings.storage.path)
    return _service


def get_validator() -> RequestValidator:
    return RequestValidator(settings.validation.disallowed_substrings)


ServiceDep = Annotated[AnalysisService, Depends(get_service)]
ValidatorDep = Annotated[RequestValidator, Depends(get_validator)]


def _markdown_filename(name: str | None, analysis_id: int) -> str:
    if name:
        return f"{name}.md"
    return f"analysis-{analysis_id}.md"


def _content_disposition(filename: str) -> str:
    """form-data disposition with a quoted ASCII filename.

    Non-ASCII names also get an RFC 5987 ``filename*`` parameter and a
    ``_``-substituted fallback in ``filename``.
    """
    fallback = "".join(ch if " " <= ch <= "~" else "_" for ch in filename)
    quoted = fallback.replace("\\", "\\\\").replace('"', '\\"')
    value = f'form-data; name="attachment"; filename="{quoted}"'
    if fallback != filename:
        value += f"; filename*=UTF-8''{quote(filename, safe='')}"
    return value


app = FastAPI(title="csvscope", version="0.1.0")


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.post("/api/analysis/ingestCsv", response_model=AnalysisResponse)
async def ingest_csv(
    request: Request,
    service: ServiceDep,
    validator: ValidatorDep,
    name: str | None = None,
):
    body = await request.body()
    try:
        data = validator.decode(body)
        validator.check(data)
        # Parsing, tokenizing and the store rewrite are blocking work
        analysis = await run_in_threadpool(service.analyze, data, name=name)
    except (RejectedInputError, MalformedInputError) as exc:
        log.warning("Rejected CSV ingest: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return AnalysisResponse.from_analysis(analysis)


@app.get("/api/analysis", response_model=list[AnalysisResponse])
def list_analyses(service: ServiceDep):
    return [AnalysisResponse.from_analysis(a) for a in service.list_all()]


@app.get("/api/analysis/{analysis_id}", response_model=AnalysisResponse)
def get_analysis(analysis_id: int, service: ServiceDep):
    try:
        analysis = service.get(analysis_id)
    except AnalysisNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return AnalysisResponse.from_analysis(analysis)


@app.delete("/api/analysis/{analysis_id}", status_code=204)
def delete_analysis(analysis_id: int, service: ServiceDep):
    try:
        service.delete(analysis_id)
    except AnalysisNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return Response(status_code=204)


@app.get("/api/analysis/{analysis_id}/markdown")
def download_markdown(analysis_id: int, service: ServiceDep):
    try:
        analysis = service.get(analysis_id)
        markdown = service.markdown(analysis_id)
    except AnalysisNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    filename = _markdown_filename(analysis.name, analysis_id)
    return Response(
        content=markdown,
        media_type="text/markdown",
        headers={"Content-Disposition": _content_disposition(filename)},
    )
