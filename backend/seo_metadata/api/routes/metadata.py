"""Metadata generation and content analysis routes."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from seo_metadata.api.deps import Analyzer, Generator
from seo_metadata.pipeline import get_pages
from seo_metadata.services.metadata_generator import PageMetadata
from seo_metadata.services.seo_score import MAX_SEO_SCORE, seo_score

router = APIRouter()


class GenerateMetadataRequest(BaseModel):
    """Page to generate metadata for."""

    url: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class PageMetadataResponse(BaseModel):
    """Generated metadata with its SEO score."""

    id: int
    url: str
    title: str
    description: str
    keywords: str
    seo_score: int
    max_seo_score: int = MAX_SEO_SCORE

    @classmethod
    def from_page(cls, page: PageMetadata) -> "PageMetadataResponse":
        return cls(
            id=page.id,
            url=page.url,
            title=page.title,
            description=page.description,
            keywords=page.keywords,
            seo_score=seo_score(page),
        )


class PageListResponse(BaseModel):
    """List of pages."""

    pages: list[PageMetadataResponse]
    total: int


class AnalyzeRequest(BaseModel):
    """Content to analyze."""

    content: str = Field(..., min_length=1)


class AnalyzeResponse(BaseModel):
    """SEO suggestions, one per entry."""

    suggestions: list[str]


@router.post("/metadata", response_model=PageMetadataResponse)
async def generate_metadata(
    payload: GenerateMetadataRequest,
    generator: Generator,
) -> PageMetadataResponse:
    """Generate SEO metadata for a page."""
    page = await generator.generate(payload.url, payload.content)
    return PageMetadataResponse.from_page(page)


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    payload: AnalyzeRequest,
    analyzer: Analyzer,
) -> AnalyzeResponse:
    """Suggest SEO improvements for content."""
    suggestions = await analyzer.analyze(payload.content)
    return AnalyzeResponse(suggestions=suggestions)


@router.get("/pages", response_model=PageListResponse)
async def list_pages() -> PageListResponse:
    """List stored pages (always empty, nothing is persisted)."""
    pages = await get_pages()
    return PageListResponse(
        pages=[PageMetadataResponse.from_page(page) for page in pages],
        total=len(pages),
    )
