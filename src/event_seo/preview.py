"""
Platform preview rendering.

Shows how an SEO payload renders in a search result and on two social card
formats, each with its own title and description budget. Also builds the
head meta tags a page emits for the payload.
"""

import logging
from typing import Optional
from urllib.parse import quote, urlsplit

from .config import DEFAULT_CONFIG, EngineConfig, PreviewBudget
from .models import PlatformPreview, PreviewPlatform, PreviewRendering, SEOContent

logger = logging.getLogger(__name__)

ELLIPSIS = "..."

# Characters browsers leave unencoded in a URL path
_PATH_SAFE = "/%:@!$&'()*+,;=-._~[]|^\\"


def truncate_text(text: str, max_length: int) -> str:
    """
    Shorten text to at most max_length characters.

    Text that already fits is returned unchanged. Otherwise the first
    max_length - 3 characters are kept and an ellipsis is appended.

    Args:
        text: Text to shorten.
        max_length: Maximum length of the result.

    Returns:
        Text of length <= max_length.
    """
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text
    if max_length <= len(ELLIPSIS):
        return text[:max_length]
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def format_display_url(url: str) -> str:
    """
    Format a URL the way search results display it: host plus path.

    Scheme, credentials, port, query and fragment are stripped and the path
    is percent-encoded. URLs without a host show the path alone. Anything
    without a scheme, or that fails to parse, is returned unchanged.

    Examples:
        >>> format_display_url("https://gema-events.com/events/123?ref=home")
        'gema-events.com/events/123'
        >>> format_display_url("mailto:info@gema-events.com")
        'info@gema-events.com'
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        # Accessing port validates it and raises ValueError when malformed
        parts.port
    except (ValueError, TypeError, AttributeError) as e:
        logger.debug(f"Could not parse URL {url!r}: {e}")
        return url

    if not parts.scheme:
        return url

    path = quote(parts.path, safe=_PATH_SAFE)
    if hostname:
        return f"{hostname}{path or '/'}"
    return path


def resolve_canonical_url(
    content: SEOContent,
    path: str = "",
    config: EngineConfig = DEFAULT_CONFIG,
) -> str:
    """Return the content's canonical URL, or the site root joined with path."""
    if content.canonical_url and content.canonical_url.strip():
        return content.canonical_url.strip()
    return f"{config.base_url.rstrip('/')}{path}"


def _render(
    platform: PreviewPlatform,
    content: SEOContent,
    display_url: str,
    budget: PreviewBudget,
) -> PreviewRendering:
    return PreviewRendering(
        platform=platform,
        title=truncate_text(content.title, budget.title),
        description=truncate_text(content.description, budget.description),
        display_url=display_url,
        title_budget=budget.title,
        description_budget=budget.description,
    )


def preview_content(
    content: SEOContent,
    url: Optional[str] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> PlatformPreview:
    """
    Render the payload for every supported platform.

    Args:
        content: The SEO payload to preview.
        url: Page URL. Defaults to the content's canonical URL, or the
            site root when it has none.
        config: Engine configuration holding the platform budgets.

    Returns:
        PlatformPreview with one rendering per platform.
    """
    page_url = url if url is not None else resolve_canonical_url(content, config=config)
    display_url = format_display_url(page_url)

    return PlatformPreview(
        search_result=_render(
            PreviewPlatform.SEARCH_RESULT, content, display_url, config.search_budget
        ),
        social_card_a=_render(
            PreviewPlatform.SOCIAL_CARD_A, content, display_url, config.social_card_a_budget
        ),
        social_card_b=_render(
            PreviewPlatform.SOCIAL_CARD_B, content, display_url, config.social_card_b_budget
        ),
        title_length=len(content.title),
        description_length=len(content.description),
    )


def build_meta_tags(
    content: SEOContent,
    path: str = "",
    og_image: Optional[str] = None,
    og_type: str = "website",
    twitter_card: str = "summary_large_image",
    no_index: bool = False,
    no_follow: bool = False,
    config: EngineConfig = DEFAULT_CONFIG,
) -> dict[str, str]:
    """
    Build the head tags a page renders for the payload.

    Keys are tag names (`name` or `property` attribute values); the
    canonical link is returned under "canonical".

    Args:
        content: The SEO payload.
        path: Page path, used when the content has no canonical URL.
        og_image: Absolute image URL. Defaults to the site's default image.
        og_type: Open Graph object type ("website", "article", "product").
        twitter_card: Twitter card type.
        no_index: Ask crawlers not to index the page.
        no_follow: Ask crawlers not to follow links on the page.
        config: Engine configuration.

    Returns:
        Mapping of tag name to content.
    """
    canonical = resolve_canonical_url(content, path, config)
    image = og_image or f"{config.base_url.rstrip('/')}{config.default_og_image}"

    robots = []
    if no_index:
        robots.append("noindex")
    if no_follow:
        robots.append("nofollow")
    if not robots:
        robots = ["index", "follow"]

    return {
        "title": content.title,
        "description": content.description,
        "keywords": ", ".join(content.keywords),
        "robots": ", ".join(robots),
        "canonical": canonical,
        "og:title": content.title,
        "og:description": content.description,
        "og:type": og_type,
        "og:url": canonical,
        "og:image": image,
        "og:site_name": config.brand_name,
        "twitter:card": twitter_card,
        "twitter:title": content.title,
        "twitter:description": content.description,
        "twitter:image": image,
    }
