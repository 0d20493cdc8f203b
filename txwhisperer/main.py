import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from txwhisperer import __version__
from txwhisperer.classifiers import detect
from txwhisperer.config import settings
from txwhisperer.contamination.matcher import DISCLAIMER, check_contamination
from txwhisperer.contamination.table import get_flagged_table
from txwhisperer.explorers import chain_display_name, explorer_links
from txwhisperer.history.file_store import HistoryFileStore
from txwhisperer.history.manager import CheckHistory
from txwhisperer.models.chain import Chain
from txwhisperer.validation.input import validate_input
from txwhisperer.validation.normalize import normalize

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("txwhisperer.main")

app = FastAPI(title="Tx Whisperer API", version=__version__)

history_store = HistoryFileStore(settings.history_path) if settings.history_path else None
history = CheckHistory(
    max_items=settings.history_max_items,
    items=history_store.load() if history_store else None,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info(
        "%s %s -> %s",
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid JSON in request body."},
    )


class ContaminationRequest(BaseModel):
    input: Any = None


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _persist_history() -> None:
    if history_store is not None:
        history_store.save(history)


@app.get("/api/contamination")
async def contamination_info():
    table = get_flagged_table()
    return {
        "name": "Contamination Check API",
        "version": __version__,
        "description": "Check addresses and transactions against a demo blacklist",
        "disclaimer": DISCLAIMER,
        "table_info": table.info().model_dump(),
        "endpoints": {
            "POST": {
                "description": "Check an input for contamination",
                "body": {"input": "string (address or tx hash)"},
            },
        },
    }


@app.post("/api/contamination")
async def contamination_check(body: ContaminationRequest):
    value = validate_input(body.input)
    table = get_flagged_table()

    normalized = normalize(value)
    chain, kind = detect(normalized)
    result = check_contamination(normalized, table)

    logger.info(
        "CHECK %s... chain=%s kind=%s status=%s matches=%d",
        normalized[:12],
        chain.value,
        kind.value,
        result.status,
        len(result.matches),
    )

    history.add(normalized, chain, kind, result.status)
    _persist_history()

    return {
        **result.model_dump(mode="json"),
        "checked_at": _utc_now(),
        "normalized_input": normalized,
        "chain": chain.value,
        "input_kind": kind.value,
        "table_info": table.info().model_dump(),
        "disclaimer": DISCLAIMER,
    }


@app.get("/api/detect")
async def detect_input(value: str = Query(default="", alias="input")):
    value = validate_input(value)
    normalized = normalize(value)
    chain, kind = detect(normalized)
    return {
        "normalized_input": normalized,
        "chain": chain.value,
        "chain_name": chain_display_name(chain),
        "input_kind": kind.value,
        "valid": chain is not Chain.UNKNOWN,
        "explorer_urls": explorer_links(normalized),
    }


@app.get("/api/history")
async def list_history():
    return {"items": [item.model_dump(mode="json") for item in history.items()]}


@app.delete("/api/history")
async def clear_history():
    history.clear()
    if history_store is not None:
        history_store.clear()
    return {"items": []}


@app.delete("/api/history/{value}")
async def remove_history_item(value: str):
    if not history.remove(value):
        raise HTTPException(status_code=404, detail="Value not in history")
    _persist_history()
    return {"items": [item.model_dump(mode="json") for item in history.items()]}
