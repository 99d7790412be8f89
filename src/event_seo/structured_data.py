"""
Structured data and page presets.

Builds schema.org JSON-LD for event pages, blog posts and breadcrumb
trails, and the SEO fields of category listing pages.

Fields without a value are left out of the markup instead of being
emitted as null.
"""

import json
import logging
from typing import Any

from .config import DEFAULT_CONFIG, EngineConfig
from .models import BlogPostDetails, BreadcrumbItem, CategoryDetails, EventDetails, SEOContent

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "https://schema.org"
IN_STOCK = "https://schema.org/InStock"
DEFAULT_PLACE_NAME = "Event Location"


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop None values, recursing into nested objects."""
    result = {}
    for key, value in data.items():
        if isinstance(value, dict):
            value = _compact(value)
        elif isinstance(value, list):
            value = [_compact(v) if isinstance(v, dict) else v for v in value]
        if value is not None:
            result[key] = value
    return result


def _site_url(url: str, config: EngineConfig) -> str:
    """Resolve a site-relative URL against the base URL; absolute URLs pass through."""
    if "://" in url:
        return url
    return f"{config.base_url.rstrip('/')}{url}"


def build_event_structured_data(
    event: EventDetails,
    config: EngineConfig = DEFAULT_CONFIG,
) -> dict[str, Any]:
    """
    Build schema.org Event markup for an event page.

    The event is placed at its street address (or a generic place name),
    offered at its price in stock, and organized by the brand.

    Args:
        event: Event fields.
        config: Engine configuration holding brand, country and currency.

    Returns:
        JSON-LD object ready for json.dumps().
    """
    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "Event",
        "name": event.title,
        "description": event.description,
        "startDate": event.start_date,
        "endDate": event.end_date,
        "location": {
            "@type": "Place",
            "name": event.address or DEFAULT_PLACE_NAME,
            "address": {
                "@type": "PostalAddress",
                "streetAddress": event.address,
                "addressLocality": event.city,
                "addressCountry": config.country_code,
            },
        },
        "offers": {
            "@type": "Offer",
            "price": event.price or 0,
            "priceCurrency": event.currency or config.currency,
            "availability": IN_STOCK,
        },
        "organizer": {
            "@type": "Organization",
            "name": config.brand_name,
            "url": config.base_url,
        },
    })


def build_blog_structured_data(
    post: BlogPostDetails,
    config: EngineConfig = DEFAULT_CONFIG,
) -> dict[str, Any]:
    """Build schema.org BlogPosting markup, published by the brand."""
    return _compact({
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": post.title,
        "description": post.excerpt,
        "image": post.image,
        "datePublished": post.published_at,
        "dateModified": post.modified_at,
        "author": {
            "@type": "Person",
            "name": post.author_name or f"{config.brand_name} Team",
        },
        "publisher": {
            "@type": "Organization",
            "name": config.brand_name,
            "logo": {
                "@type": "ImageObject",
                "url": _site_url(config.logo_path, config),
            },
        },
    })


def build_breadcrumbs(
    items: list[BreadcrumbItem],
    config: EngineConfig = DEFAULT_CONFIG,
) -> dict[str, Any]:
    """
    Build schema.org BreadcrumbList markup.

    Positions start at 1 in trail order. Site-relative URLs are resolved
    against the base URL.
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": item.name,
                "item": _site_url(item.url, config),
            }
            for position, item in enumerate(items, start=1)
        ],
    }


def generate_category_seo(
    category: CategoryDetails,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SEOContent:
    """
    Build the SEO fields of a category listing page.

    The category's own description and keywords win over the templates.

    Examples:
        >>> generate_category_seo(CategoryDetails(name="Sports", slug="sports")).title
        'Sports Events for Kids | Gema Events'
    """
    name = category.name.strip()
    location = config.default_location

    description = category.description or (
        f"Discover amazing {name.lower()} activities and events for children "
        f"in the {location}. Book now for unforgettable experiences."
    )
    keywords = category.keywords or [
        "kids activities", "events", location, name.lower(), "activities",
    ]

    logger.debug(f"Built category SEO for '{name}'")
    return SEOContent(
        title=f"{name} Events for Kids | {config.brand_name}",
        description=description,
        keywords=keywords,
        canonical_url=_site_url(f"/categories/{category.slug}", config),
    )


def render_json_ld(data: dict[str, Any]) -> str:
    """Render structured data as a script tag safe to embed in HTML."""
    payload = json.dumps(data, ensure_ascii=False).replace("</", "<\\/")
    return f'<script type="application/ld+json">{payload}</script>'
