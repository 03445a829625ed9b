from __future__ import annotations

import os
import uuid

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from .catalog.store import CatalogStore, CatalogUnavailableError, get_catalog_store
from .checkout.orders import CheckoutError, place_order
from .checkout.results import ResultStore, get_result_store
from .interpreter import QueryInterpreter, get_query_interpreter
from .pricing.cache import PriceAssigner, get_price_assigner
from .recommendations.models import (
    CheckoutRequest,
    CheckoutResponse,
    InterpretRequest,
    SearchRequest,
    SearchResponse,
)
from .recommendations.retrieval import search_dishes

app = FastAPI(title="BREEZ Dish Recommendation API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "breez-secret-change-in-production"),
)


@app.exception_handler(CatalogUnavailableError)
async def catalog_unavailable(request: Request, exc: CatalogUnavailableError) -> JSONResponse:
    return JSONResponse(status_code=503, content={"detail": str(exc)})


def _session_id(request: Request) -> str:
    sid = request.session.get("sid")
    if not sid:
        sid = uuid.uuid4().hex
        request.session["sid"] = sid
    return sid


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata(store: CatalogStore = Depends(get_catalog_store)) -> dict:
    records = store.fetch_all()
    return {
        "categories": sorted({r.category for r in records}),
        "vendors": sorted({r.vendor for r in records if r.vendor}),
        "tastes": sorted({r.taste for r in records if r.taste}),
        "price_tiers": sorted({r.price_tier for r in records if r.price_tier}),
    }


@app.post("/sendQuery")
def send_query(
    body: InterpretRequest,
    interpreter: QueryInterpreter = Depends(get_query_interpreter),
) -> dict:
    return interpreter.interpret(body.user_query_str).non_null()


# ── Search & checkout ────────────────────────────────────────────────────


@app.post("/search", response_model=SearchResponse)
def search(
    body: SearchRequest,
    request: Request,
    interpreter: QueryInterpreter = Depends(get_query_interpreter),
    store: CatalogStore = Depends(get_catalog_store),
    prices: PriceAssigner = Depends(get_price_assigner),
    results: ResultStore = Depends(get_result_store),
) -> SearchResponse:
    response = search_dishes(body.query, interpreter, store, prices)

    # Checkout indices refer to the latest results of this session.
    results.save(_session_id(request), response.items)
    return response


@app.post("/checkout", response_model=CheckoutResponse)
def checkout(
    body: CheckoutRequest,
    request: Request,
    results: ResultStore = Depends(get_result_store),
) -> CheckoutResponse:
    sid = _session_id(request)
    try:
        order = place_order(results.get(sid), body.selected)
    except CheckoutError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    results.clear(sid)
    return order


# ── Pricing ──────────────────────────────────────────────────────────────


@app.get("/prices/stats")
def price_stats(prices: PriceAssigner = Depends(get_price_assigner)) -> dict:
    return prices.get_stats()
