"""
Bulk SEO audit of loaded content rows.
"""

import logging

import pandas as pd

from .analysis import analyze_seo
from .config import DEFAULT_CONFIG, EngineConfig
from .models import ContentAuditRow
from .scoring import score_band
from .validator import validate_seo

logger = logging.getLogger(__name__)

AUDIT_COLUMNS = [
    "row_id",
    "title_length",
    "description_length",
    "keyword_count",
    "title_score",
    "description_score",
    "keyword_score",
    "overall_score",
    "band",
    "is_valid",
    "warnings",
]


def audit_rows(rows: list[ContentAuditRow], config: EngineConfig = DEFAULT_CONFIG) -> pd.DataFrame:
    """
    Validate and analyze every row.

    Args:
        rows: Content rows, typically from load_content_rows().
        config: Engine configuration.

    Returns:
        DataFrame with one row per content item, columns AUDIT_COLUMNS.
        Warnings are joined with " | ".
    """
    records = []
    for row in rows:
        analysis = analyze_seo(row.content, config)
        validation = validate_seo(row.content, config)
        records.append({
            "row_id": row.row_id,
            **analysis.to_dict(),
            "band": score_band(analysis.overall_score).label.value,
            "is_valid": validation.is_valid,
            "warnings": " | ".join(validation.warnings),
        })

    invalid = sum(1 for r in records if not r["is_valid"])
    logger.info(f"Audited {len(records)} content rows, {invalid} with warnings")

    return pd.DataFrame(records, columns=AUDIT_COLUMNS)
