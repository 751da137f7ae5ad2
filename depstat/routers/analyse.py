import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from depstat.analytics.ranking import ORDER_KEYS
from depstat.config import AnalyseOptions
from depstat.errors import ParseError
from depstat.pipeline import analyse
from depstat.readers import split_lines
from depstat.report import report_payload

log = logging.getLogger("depstat.api")

router = APIRouter()


class AnalyseRequest(BaseModel):
    edges: Optional[str]       = None
    lines: Optional[list[str]] = None


@router.post("/api/analyse")
def analyse_edges(
    req:   AnalyseRequest,
    order: str = Query(""),
    limit: int = Query(0),
):
    lines = req.lines if req.lines is not None else split_lines(req.edges or "")
    try:
        report = analyse(lines, AnalyseOptions(order=order, limit=limit))
    except ParseError as e:
        log.warning("rejected edge line %r (%d fields)", e.line, e.fields)
        raise HTTPException(
            status_code=422,
            detail=f"Malformed edge line {e.line!r}: got {e.fields} fields. Expected \"A\" -> \"B\";",
        )
    return report_payload(report)


@router.get("/api/orders")
def list_orders():
    return {"orders": list(ORDER_KEYS)}


@router.get("/api/health")
def health():
    return {"ok": True}
