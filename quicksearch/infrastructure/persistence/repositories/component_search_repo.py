"""Component search repository: substring search on component name and key.

Ranks matches per qualifier in SQL (row_number over qualifier partitions) so a
single statement returns at most `limit` hits for every requested qualifier.
"""

from __future__ import annotations

import html
import re
from collections.abc import Sequence

from sqlalchemy import Select, String, case, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from quicksearch.application.dtos.suggestion import (
    ComponentHit,
    ComponentHitsPerQualifier,
)
from quicksearch.core.constants import HIGHLIGHT_END, HIGHLIGHT_START
from quicksearch.domain.enums import Qualifier
from quicksearch.infrastructure.persistence.models.component import Component

_LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards (% and _) and the escape char so value matches literally."""
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def highlight(text: str, query: str) -> str | None:
    """Return text HTML-escaped with each case-insensitive match of query in <mark> tags.

    Returns None when query does not occur in text.
    """
    if not query:
        return None
    # Per-character case folding, like ILIKE under a UTF-8 collation (Kelvin
    # sign matches k). Multi-character folds such as "ß"/"ss" match in neither.
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    pieces: list[str] = []
    last = 0
    for match in pattern.finditer(text):
        pieces.append(html.escape(text[last : match.start()]))
        pieces.append(HIGHLIGHT_START + html.escape(match.group(0)) + HIGHLIGHT_END)
        last = match.end()
    if not pieces:
        return None
    pieces.append(html.escape(text[last:]))
    return "".join(pieces)


def build_search_statement(
    query: str, qualifiers: Sequence[Qualifier], limit: int
) -> Select:
    """Build the ranked search: id, name, qualifier of the top `limit` hits per qualifier.

    Rank within a qualifier: exact name/key match, then name prefix, then
    shorter name, then name, then key.
    """
    lowered = query.lower()
    pattern = f"%{escape_like(query)}%"
    name_lower = func.lower(Component.name, type_=String)
    key_lower = func.lower(Component.key, type_=String)
    relevance = case(
        (or_(name_lower == lowered, key_lower == lowered), 0),
        (name_lower.startswith(lowered, autoescape=True), 1),
        else_=2,
    )
    rank = (
        func.row_number()
        .over(
            partition_by=Component.qualifier,
            order_by=(
                relevance,
                func.length(Component.name),
                Component.name,
                Component.key,
            ),
        )
        .label("rank")
    )
    ranked = (
        select(Component.id, Component.name, Component.qualifier, rank)
        .where(
            Component.enabled.is_(True),
            Component.qualifier.in_([q.value for q in qualifiers]),
            or_(
                Component.name.ilike(pattern, escape=_LIKE_ESCAPE),
                Component.key.ilike(pattern, escape=_LIKE_ESCAPE),
            ),
        )
        .subquery("ranked")
    )
    return (
        select(ranked.c.id, ranked.c.name, ranked.c.qualifier)
        .where(ranked.c.rank <= limit)
        .order_by(ranked.c.qualifier, ranked.c.rank)
    )


class ComponentSearchRepository:
    """Ranked component search grouped by qualifier."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def search(
        self, query: str, qualifiers: Sequence[Qualifier], limit: int
    ) -> list[ComponentHitsPerQualifier]:
        """Return hits per qualifier in the order of `qualifiers`; qualifiers without hits are omitted."""
        query = query.strip()
        if not query or not qualifiers or limit < 1:
            return []
        r = await self.db.execute(build_search_statement(query, qualifiers, limit))
        hits_by_qualifier: dict[str, list[ComponentHit]] = {}
        for row in r.mappings().all():
            hits_by_qualifier.setdefault(row["qualifier"], []).append(
                ComponentHit(
                    component_id=row["id"],
                    highlighted_text=highlight(row["name"], query),
                )
            )
        return [
            ComponentHitsPerQualifier(
                qualifier=q.value, hits=tuple(hits_by_qualifier[q.value])
            )
            for q in qualifiers
            if q.value in hits_by_qualifier
        ]
