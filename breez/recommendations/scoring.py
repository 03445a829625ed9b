from __future__ import annotations

from typing import Any, Sequence

from .models import CatalogRecord, QueryAttributes, ScoredRecord

DIETARY_KEY = "dietary_restrictions"
_DIETARY_FIELD = "dietary_restriction"


def _as_text(value: Any) -> str | None:
    """Lowercased text form of a scalar record value, or None for sequences."""
    if value is None or isinstance(value, (list, tuple)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).lower()


def is_excluded(attributes: QueryAttributes, record: CatalogRecord) -> bool:
    """True when the query names a single restriction the dish carries."""
    wanted = attributes.dietary_restrictions
    carried = record.dietary_restriction
    if not isinstance(wanted, str) or not isinstance(carried, str):
        return False
    return carried.lower() == wanted.lower()


def score_record(record: CatalogRecord, entries: dict[str, Any]) -> int:
    """Count how many non-null query attributes the record satisfies."""
    score = 0
    for key, query_value in entries.items():
        if key == DIETARY_KEY:
            # Only the list form scores here; the text form is handled by is_excluded.
            record_value = getattr(record, _DIETARY_FIELD, None)
            if isinstance(query_value, list) and isinstance(record_value, list):
                if any(v in record_value for v in query_value):
                    score += 1
            continue

        record_text = _as_text(getattr(record, key, None))
        if record_text is not None and record_text == str(query_value).lower():
            score += 1
    return score


def rank_by_popularity(catalog: Sequence[CatalogRecord]) -> list[CatalogRecord]:
    return sorted(catalog, key=lambda r: r.average_rating, reverse=True)


def rank(
    attributes: QueryAttributes,
    catalog: Sequence[CatalogRecord],
) -> list[CatalogRecord]:
    """
    Rank catalog records against the structured query.

    Records the query excludes are dropped before scoring. Records scoring
    zero are dropped; the rest come back as ``ScoredRecord`` ordered by
    ``match_score``. When nothing scores, the whole catalog is returned by
    ``average_rating`` instead, without applying the exclusion. Both orders
    are stable.
    """
    entries = attributes.non_null()

    scored: list[ScoredRecord] = []
    for record in catalog:
        if is_excluded(attributes, record):
            continue
        score = score_record(record, entries)
        if score > 0:
            scored.append(
                ScoredRecord.model_validate({**record.model_dump(), "match_score": score})
            )

    if not scored:
        return rank_by_popularity(catalog)

    return sorted(scored, key=lambda r: r.match_score, reverse=True)
