from __future__ import annotations

import logging
import time
from typing import Sequence

from ..catalog.store import CatalogStore
from ..interpreter import QueryInterpreter
from ..pricing.cache import PriceAssigner
from .expander import expand
from .models import CatalogRecord, QueryAttributes, ScoredRecord, SearchResponse
from .scoring import rank

logger = logging.getLogger(__name__)


def rank_and_price(
    attributes: QueryAttributes,
    catalog: Sequence[CatalogRecord],
    prices: PriceAssigner,
) -> SearchResponse:
    ranked = rank(attributes, catalog)
    # Scored results are ScoredRecord; the popularity order holds plain records.
    fallback = not any(isinstance(r, ScoredRecord) for r in ranked)

    return SearchResponse(
        items=expand(ranked, prices),
        total_candidates=len(ranked),
        fallback=fallback,
        parsed_attributes=attributes.non_null(),
    )


def search_dishes(
    query: str,
    interpreter: QueryInterpreter,
    store: CatalogStore,
    prices: PriceAssigner,
) -> SearchResponse:
    """
    Run one search: interpret, fetch, rank, expand.

    The catalog is fetched only after the interpreter has answered. Catalog
    errors propagate to the caller.
    """
    start_time = time.time()

    attributes = interpreter.interpret(query)
    catalog = store.fetch_all()
    response = rank_and_price(attributes, catalog, prices)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.info(
        "Search ranked %d of %d dishes into %d items (fallback=%s) in %.1f ms",
        response.total_candidates,
        len(catalog),
        len(response.items),
        response.fallback,
        elapsed_ms,
    )
    return response
