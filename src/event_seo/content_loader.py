"""
Bulk content loading from CSV and Excel files.

This module reads exported event/article listings so their SEO fields can
be audited in one pass. Supported formats:
- CSV files
- Excel files (.xlsx, .xls)
"""

from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .models import ContentAuditRow, SEOContent


class ContentLoadError(Exception):
    """Raised when content loading fails."""
    pass


# Common column name variations for exported SEO data
TITLE_COLUMN_VARIANTS = ["title", "meta_title", "seo_title", "name"]
DESCRIPTION_COLUMN_VARIANTS = ["description", "meta_description", "seo_description", "summary"]
KEYWORDS_COLUMN_VARIANTS = ["keywords", "meta_keywords", "seo_keywords", "tags"]
URL_COLUMN_VARIANTS = ["canonical_url", "canonical", "url", "link"]
ID_COLUMN_VARIANTS = ["id", "_id", "slug", "event_id", "blog_id"]


def _normalize_column_name(name: str) -> str:
    """Normalize column name for matching."""
    return str(name).lower().strip().replace(" ", "_").replace("-", "_")


def _find_column(df: pd.DataFrame, variants: list[str]) -> Optional[str]:
    """
    Find a column in the DataFrame matching one of the variant names.

    Args:
        df: The DataFrame to search.
        variants: List of possible column name variants.

    Returns:
        The actual column name if found, None otherwise.
    """
    normalized_columns = {_normalize_column_name(col): col for col in df.columns}

    for variant in variants:
        normalized = _normalize_column_name(variant)
        if normalized in normalized_columns:
            return normalized_columns[normalized]

    return None


def _cell_text(row: pd.Series, column: Optional[str]) -> str:
    if column is None or pd.isna(row[column]):
        return ""
    return str(row[column])


def split_keywords(value: str) -> list[str]:
    """Split a comma-separated keywords cell into a list."""
    return [part.strip() for part in value.split(",") if part.strip()]


def load_content_from_csv(file_path: Union[str, Path]) -> list[ContentAuditRow]:
    """
    Load content rows from a CSV file.

    Raises:
        ContentLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentLoadError(f"File not found: {file_path}")

    try:
        df = pd.read_csv(path, encoding="utf-8", dtype=str, keep_default_na=False, na_values=[""])
    except UnicodeDecodeError:
        try:
            df = pd.read_csv(path, encoding="latin-1", dtype=str, keep_default_na=False, na_values=[""])
        except Exception as e:
            raise ContentLoadError(f"Failed to read CSV file: {e}")
    except pd.errors.EmptyDataError:
        raise ContentLoadError("Content file is empty")
    except Exception as e:
        raise ContentLoadError(f"Failed to read CSV file: {e}")

    return _parse_content_dataframe(df)


def load_content_from_excel(
    file_path: Union[str, Path], sheet_name: Optional[str] = None
) -> list[ContentAuditRow]:
    """
    Load content rows from an Excel file.

    Args:
        file_path: Path to the Excel file (.xlsx or .xls).
        sheet_name: Optional sheet name to read from. Defaults to first sheet.

    Raises:
        ContentLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentLoadError(f"File not found: {file_path}")

    try:
        if sheet_name:
            df = pd.read_excel(path, sheet_name=sheet_name, dtype=str)
        else:
            df = pd.read_excel(path, dtype=str)
    except Exception as e:
        raise ContentLoadError(f"Failed to read Excel file: {e}")

    return _parse_content_dataframe(df)


def _parse_content_dataframe(df: pd.DataFrame) -> list[ContentAuditRow]:
    """
    Parse a DataFrame into content rows.

    Raises:
        ContentLoadError: If required columns are missing or no rows remain.
    """
    if df.empty:
        raise ContentLoadError("Content file is empty")

    title_col = _find_column(df, TITLE_COLUMN_VARIANTS)
    if title_col is None:
        raise ContentLoadError(
            f"No title column found. Expected one of: {', '.join(TITLE_COLUMN_VARIANTS)}. "
            f"Found columns: {', '.join(str(c) for c in df.columns)}"
        )

    description_col = _find_column(df, DESCRIPTION_COLUMN_VARIANTS)
    keywords_col = _find_column(df, KEYWORDS_COLUMN_VARIANTS)
    url_col = _find_column(df, URL_COLUMN_VARIANTS)
    id_col = _find_column(df, ID_COLUMN_VARIANTS)

    rows: list[ContentAuditRow] = []

    for position, (_, row) in enumerate(df.iterrows(), start=1):
        title = _cell_text(row, title_col)
        description = _cell_text(row, description_col)
        if not title.strip() and not description.strip():
            continue

        row_id = _cell_text(row, id_col).strip() or str(position)
        canonical_url = _cell_text(row, url_col).strip() or None

        rows.append(
            ContentAuditRow(
                row_id=row_id,
                content=SEOContent(
                    title=title,
                    description=description,
                    keywords=split_keywords(_cell_text(row, keywords_col)),
                    canonical_url=canonical_url,
                ),
            )
        )

    if not rows:
        raise ContentLoadError("No content rows found in file")

    return rows


def load_content_rows(
    file_path: Union[str, Path], sheet_name: Optional[str] = None
) -> list[ContentAuditRow]:
    """
    Load content rows from a CSV or Excel file.

    Automatically detects file type based on extension.

    Raises:
        ContentLoadError: If the file cannot be read or is invalid.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        return load_content_from_csv(path)
    elif suffix in (".xlsx", ".xls"):
        return load_content_from_excel(path, sheet_name)
    else:
        raise ContentLoadError(
            f"Unsupported file format: {suffix}. Supported formats: .csv, .xlsx, .xls"
        )
