"""
Event Ingestion API
"""
import json
import logging

from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from lexie_analytics.core.errors import InvalidInput
from lexie_analytics.models.event import CollectResponse
from lexie_analytics.repositories.store import EventStore
from lexie_analytics.services.ingest import ingest_batch

from .deps import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["events"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@router.options("/collect")
def collect_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/collect", response_model=CollectResponse)
async def collect(request: Request, response: Response, store: EventStore = Depends(get_store)):
    """
    Ingest a batch of client events
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInput("Invalid events data") from e

    summary = await run_in_threadpool(ingest_batch, store, payload)
    response.headers.update(CORS_HEADERS)
    return CollectResponse(message=summary.message)
