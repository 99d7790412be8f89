"""
Pytest fixtures and configuration for Event SEO tests.
"""

import pytest
from pathlib import Path

from event_seo.models import ContentType, RawContentContext, SEOContent


def text_of_length(length: int, word: str = "kids") -> str:
    """Build readable filler text of an exact length."""
    if length <= 0:
        return ""
    repeated = " ".join([word] * (length // (len(word) + 1) + 1))
    return repeated[:length]


@pytest.fixture
def make_text():
    """Factory for filler text of an exact length."""
    return text_of_length


@pytest.fixture
def optimal_content() -> SEOContent:
    """Content scoring 100 on every field."""
    return SEOContent(
        title=text_of_length(55, "dubai"),
        description=text_of_length(155, "book"),
        keywords=["kids activities", "events", "family fun", "dubai", "art"],
        canonical_url="https://gema-events.com/events/summer-art-camp",
    )


@pytest.fixture
def event_context() -> RawContentContext:
    """Raw event content with full metadata."""
    return RawContentContext(
        title="Art Camp",
        description="Painting and crafts for children aged 5 to 12.",
        content_type=ContentType.EVENT,
        category="Workshops",
        location="Dubai",
        tags=["painting", "crafts", "summer", "creative"],
    )


@pytest.fixture
def article_context() -> RawContentContext:
    """Raw article content without location or category."""
    return RawContentContext(
        title="Rainy Day Ideas",
        description="Ten indoor games the whole family will love.",
        content_type=ContentType.ARTICLE,
        tags=["indoor games"],
    )


@pytest.fixture
def sample_content_csv(tmp_path: Path) -> Path:
    """Create a sample content export CSV file."""
    csv_path = tmp_path / "events.csv"
    csv_content = """id,meta_title,meta_description,keywords,canonical_url
evt-1,Summer Art Camp for Kids in Dubai | Gema Events,"Join our summer art camp.","art, kids, summer",https://gema-events.com/events/evt-1
evt-2,,,,
evt-3,Coding Club,,,
"""
    csv_path.write_text(csv_content)
    return csv_path


@pytest.fixture
def sample_content_excel(tmp_path: Path) -> Path:
    """Create a sample content export Excel file."""
    import pandas as pd

    xlsx_path = tmp_path / "blogs.xlsx"
    data = {
        "Title": ["Rainy Day Ideas", "Best Parks in Abu Dhabi"],
        "Description": ["Ten indoor games.", "Discover green spaces for families."],
        "Tags": ["indoor, games", "parks, outdoors, family"],
    }
    df = pd.DataFrame(data)
    df.to_excel(xlsx_path, index=False)
    return xlsx_path
