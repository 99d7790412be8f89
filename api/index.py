"""
FastAPI wrapper for the Event SEO engine - Vercel Serverless Function.

This module exposes SEO validation, analysis, generation, previews and
structured data as a REST API for the content editor.
"""

from enum import Enum
from typing import Optional

from fastapi import FastAPI, Path as PathParam
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from event_seo import __version__
from event_seo.analysis import analyze_seo
from event_seo.config import DEFAULT_CONFIG
from event_seo.generator import generate_auto_seo, generate_seo_suggestions
from event_seo.keyword_extractor import DEFAULT_MAX_KEYWORDS, extract_keywords, merge_extracted_keywords
from event_seo.models import (
    BlogPostDetails,
    BreadcrumbItem,
    CategoryDetails,
    ContentType,
    EventDetails,
    RawContentContext,
    SEOContent,
)
from event_seo.preview import build_meta_tags, preview_content
from event_seo.scoring import score_band
from event_seo.structured_data import (
    build_blog_structured_data,
    build_breadcrumbs,
    build_event_structured_data,
    generate_category_seo,
    render_json_ld,
)
from event_seo.validator import validate_seo

app = FastAPI(
    title="Event SEO API",
    description="SEO scoring, validation, generation and previews for events and articles",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ContentTypeEnum(str, Enum):
    """Kind of content the SEO fields belong to."""
    event = "event"
    article = "article"


class SEOContentInput(BaseModel):
    """SEO fields as edited by the author."""
    title: str = Field("", description="Meta title")
    description: str = Field("", description="Meta description")
    keywords: list[str] = Field(default_factory=list, description="Keyword list")
    canonical_url: Optional[str] = Field(None, description="Canonical URL of the page")

    def to_content(self) -> SEOContent:
        return SEOContent(
            title=self.title,
            description=self.description,
            keywords=self.keywords,
            canonical_url=self.canonical_url,
        )


class RawContentInput(BaseModel):
    """Raw event or article content to generate SEO fields from."""
    title: str = Field(..., description="Content title")
    description: str = Field("", description="Content description or excerpt")
    content_type: ContentTypeEnum = Field(ContentTypeEnum.event, description="Event or article")
    category: Optional[str] = None
    location: Optional[str] = None
    tags: list[str] = Field(default_factory=list)

    def to_context(self) -> RawContentContext:
        return RawContentContext(
            title=self.title,
            description=self.description,
            content_type=ContentType(self.content_type.value),
            category=self.category,
            location=self.location,
            tags=self.tags,
        )


class SuggestionsRequest(BaseModel):
    """Current SEO fields plus the context advisory suggestions draw on."""
    content: SEOContentInput = Field(default_factory=SEOContentInput)
    content_type: Optional[ContentTypeEnum] = None
    category: Optional[str] = None
    location: Optional[str] = None


class ExtractKeywordsRequest(BaseModel):
    """Text to extract keywords from, optionally merged into existing keywords."""
    text: str = Field(..., description="Source text")
    max_keywords: int = Field(DEFAULT_MAX_KEYWORDS, ge=0, description="Number of keywords to extract")
    existing: Optional[list[str]] = Field(
        None,
        description="When given, extracted keywords are merged into this list instead of returned alone",
    )


class PreviewRequest(BaseModel):
    """SEO fields and page location to preview."""
    content: SEOContentInput
    url: Optional[str] = Field(None, description="Page URL. Defaults to the canonical URL.")
    path: str = Field("", description="Page path used when no canonical URL is set")
    og_image: Optional[str] = None


class EventDetailsInput(BaseModel):
    """Event fields for schema.org Event markup."""
    title: str
    description: str = ""
    start_date: Optional[str] = Field(None, description="ISO 8601 start date")
    end_date: Optional[str] = Field(None, description="ISO 8601 end date")
    address: Optional[str] = None
    city: Optional[str] = None
    price: float = Field(0, ge=0)
    currency: Optional[str] = None

    def to_details(self) -> EventDetails:
        return EventDetails(**self.model_dump())


class BlogPostInput(BaseModel):
    """Blog post fields for schema.org BlogPosting markup."""
    title: str
    excerpt: str = ""
    image: Optional[str] = None
    published_at: Optional[str] = None
    modified_at: Optional[str] = None
    author_name: Optional[str] = None

    def to_details(self) -> BlogPostDetails:
        return BlogPostDetails(**self.model_dump())


class BreadcrumbInput(BaseModel):
    name: str
    url: str


class BreadcrumbsRequest(BaseModel):
    """Breadcrumb trail, outermost first."""
    items: list[BreadcrumbInput]


class CategoryInput(BaseModel):
    """Category listing fields."""
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    description: Optional[str] = None
    keywords: list[str] = Field(default_factory=list)


class StructuredDataResponse(BaseModel):
    structured_data: dict
    script: str


class ValidationResponse(BaseModel):
    is_valid: bool
    warnings: list[str]
    suggestions: list[str]
    score: int
    title_score: int
    description_score: int
    keyword_score: int
    band: dict


class AnalysisResponse(BaseModel):
    title_length: int
    description_length: int
    keyword_count: int
    title_score: int
    description_score: int
    keyword_score: int
    overall_score: int
    band: dict


class GeneratedResponse(BaseModel):
    title: str
    description: str
    keywords: list[str]
    score: int


class KeywordsResponse(BaseModel):
    keywords: list[str]


class PreviewResponse(BaseModel):
    search_result: dict
    social_card_a: dict
    social_card_b: dict
    title_length: int
    description_length: int
    meta_tags: dict[str, str]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/api/seo/validate", response_model=ValidationResponse)
async def validate(payload: SEOContentInput):
    """Validate SEO fields and return warnings, suggestions and scores."""
    result = validate_seo(payload.to_content())
    return ValidationResponse(**result.to_dict(), band=score_band(result.score).to_dict())


@app.post("/api/seo/analyze", response_model=AnalysisResponse)
async def analyze(payload: SEOContentInput):
    """Return lengths, counts and scores for compact score badges."""
    result = analyze_seo(payload.to_content())
    return AnalysisResponse(**result.to_dict(), band=score_band(result.overall_score).to_dict())


@app.post("/api/seo/generate", response_model=GeneratedResponse)
async def generate(payload: RawContentInput):
    """Generate SEO fields from raw event or article content."""
    generated = generate_auto_seo(payload.to_context())
    score = analyze_seo(generated.to_content()).overall_score
    return GeneratedResponse(**generated.to_dict(), score=score)


@app.post("/api/seo/suggestions")
async def suggestions(payload: SuggestionsRequest):
    """Return prioritized advisory suggestions for the current fields."""
    content_type = ContentType(payload.content_type.value) if payload.content_type else None
    items = generate_seo_suggestions(
        payload.content.to_content(),
        category=payload.category,
        location=payload.location,
        content_type=content_type,
    )
    return {"suggestions": [item.to_dict() for item in items]}


@app.post("/api/seo/keywords/extract", response_model=KeywordsResponse)
async def extract(payload: ExtractKeywordsRequest):
    """Extract keywords from text, optionally merging into an existing list."""
    if payload.existing is not None:
        keywords = merge_extracted_keywords(payload.existing, payload.text, max_keywords=payload.max_keywords)
    else:
        keywords = extract_keywords(payload.text, payload.max_keywords)
    return KeywordsResponse(keywords=keywords)


@app.post("/api/seo/preview", response_model=PreviewResponse)
async def preview(payload: PreviewRequest):
    """Render search result and social card previews plus the page meta tags."""
    content = payload.content.to_content()
    rendered = preview_content(content, payload.url)
    meta_tags = build_meta_tags(content, path=payload.path, og_image=payload.og_image)
    return PreviewResponse(**rendered.to_dict(), meta_tags=meta_tags)


@app.get("/api/seo/score-band/{score}")
async def band(score: float = PathParam(..., ge=0, le=100)):
    """Map a 0-100 score to its display color and label."""
    return score_band(score).to_dict()


@app.post("/api/seo/structured-data/event", response_model=StructuredDataResponse)
async def event_structured_data(payload: EventDetailsInput):
    """Build schema.org Event markup for an event page."""
    data = build_event_structured_data(payload.to_details())
    return StructuredDataResponse(structured_data=data, script=render_json_ld(data))


@app.post("/api/seo/structured-data/blog", response_model=StructuredDataResponse)
async def blog_structured_data(payload: BlogPostInput):
    """Build schema.org BlogPosting markup for a blog post."""
    data = build_blog_structured_data(payload.to_details())
    return StructuredDataResponse(structured_data=data, script=render_json_ld(data))


@app.post("/api/seo/structured-data/breadcrumbs", response_model=StructuredDataResponse)
async def breadcrumbs_structured_data(payload: BreadcrumbsRequest):
    """Build schema.org BreadcrumbList markup for a breadcrumb trail."""
    data = build_breadcrumbs([BreadcrumbItem(name=i.name, url=i.url) for i in payload.items])
    return StructuredDataResponse(structured_data=data, script=render_json_ld(data))


@app.post("/api/seo/category")
async def category_seo(payload: CategoryInput):
    """Build the SEO fields and meta tags of a category listing page."""
    content = generate_category_seo(CategoryDetails(**payload.model_dump()))
    return {**content.to_dict(), "meta_tags": build_meta_tags(content)}


@app.get("/api/info")
async def api_info():
    """Get API information and configured limits."""
    thresholds = DEFAULT_CONFIG.thresholds
    return {
        "name": "Event SEO API",
        "version": __version__,
        "brand": DEFAULT_CONFIG.brand_name,
        "limits": {
            "title": {
                "min": thresholds.title.min,
                "max": thresholds.title.max,
                "optimal_min": thresholds.title.optimal_min,
                "optimal_max": thresholds.title.optimal_max,
            },
            "description": {
                "min": thresholds.description.min,
                "max": thresholds.description.max,
                "optimal_min": thresholds.description.optimal_min,
                "optimal_max": thresholds.description.optimal_max,
            },
            "keywords": {
                "min": thresholds.keywords.min,
                "max": thresholds.keywords.max,
                "optimal": thresholds.keywords.optimal,
            },
        },
        "endpoints": {
            "POST /api/seo/validate": "Validate SEO fields",
            "POST /api/seo/analyze": "Score SEO fields",
            "POST /api/seo/generate": "Generate SEO fields from raw content",
            "POST /api/seo/suggestions": "Advisory suggestions",
            "POST /api/seo/keywords/extract": "Extract keywords from text",
            "POST /api/seo/preview": "Platform previews and meta tags",
            "GET /api/seo/score-band/{score}": "Score display band",
            "POST /api/seo/structured-data/event": "schema.org Event markup",
            "POST /api/seo/structured-data/blog": "schema.org BlogPosting markup",
            "POST /api/seo/structured-data/breadcrumbs": "schema.org BreadcrumbList markup",
            "POST /api/seo/category": "Category page SEO fields",
        },
    }
