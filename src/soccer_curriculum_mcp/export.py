"""Tabular keyword export and tactical keyword import with pandas."""

from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from .keywords import get_all_keywords
from .logging_config import get_logger
from .normalize import normalize_period, normalize_text

logger = get_logger(__name__)

LIST_SEPARATOR = "|"

KEYWORD_COLUMNS = ["category", "period", "phase", "key", "skill", "keyword", "synonyms", "positions"]


def keywords_dataframe(category: Optional[str] = None) -> pd.DataFrame:
    """One row per keyword record, with list columns joined by ``|``."""
    wanted = normalize_text(category) if category else None
    rows = []
    for record in get_all_keywords():
        if wanted and record.category != wanted:
            continue
        rows.append({
            "category": record.category,
            "period": record.period,
            "phase": record.phase,
            "key": record.key,
            "skill": record.skill,
            "keyword": record.keyword,
            "synonyms": LIST_SEPARATOR.join(record.synonyms),
            "positions": LIST_SEPARATOR.join(record.positions),
        })
    return pd.DataFrame(rows, columns=KEYWORD_COLUMNS)


def export_keywords_csv(path: Union[str, Path], category: Optional[str] = None) -> int:
    """Write the keyword table to CSV and return the number of rows written."""
    df = keywords_dataframe(category)
    df.to_csv(path, index=False)
    logger.info("keywords_exported", path=str(path), category=category, rows=len(df))
    return len(df)


def _split_list(value: Any) -> list[str]:
    if pd.isna(value):
        return []
    return [part.strip() for part in str(value).split(LIST_SEPARATOR) if part.strip()]


def _is_blank(value: Any) -> bool:
    return pd.isna(value) or not str(value).strip()


def _is_true(value: Any) -> bool:
    if pd.isna(value):
        return False
    return str(value).strip().lower() in ("true", "1", "yes")


def read_tactical_keywords_csv(path: Union[str, Path]) -> dict[str, Any]:
    """Read a tactical keyword CSV into a raw Period -> Phase -> Key table.

    Expected columns: period, phase, key, keyword, synonyms, positions, and
    optionally technicalCoachingPoint and pressingTrigger. Rows missing a
    period, phase, key or keyword are skipped. The result is the shape
    accepted by ``add_positions_to_tactical``.
    """
    df = pd.read_csv(path, dtype=str)
    table: dict[str, Any] = {}
    skipped = 0

    for _, row in df.iterrows():
        keyword = row.get("keyword")
        if any(_is_blank(row.get(column)) for column in ("period", "phase", "key", "keyword")):
            skipped += 1
            continue

        period = normalize_period(row.get("period"))
        phase = normalize_text(row.get("phase"))
        key = normalize_text(row.get("key"))
        item: dict[str, Any] = {
            "keyword": str(keyword).strip(),
            "synonyms": _split_list(row.get("synonyms")),
            "positions": _split_list(row.get("positions")),
        }
        if _is_true(row.get("technicalCoachingPoint")):
            item["technicalCoachingPoint"] = True
        if _is_true(row.get("pressingTrigger")):
            item["pressingTrigger"] = True
        table.setdefault(period, {}).setdefault(phase, {})[key] = item

    if skipped:
        logger.warning("tactical_rows_skipped", path=str(path), skipped=skipped)
    logger.info("tactical_keywords_read", path=str(path), periods=len(table))
    return table
