"""Simple length-based SEO score for generated metadata."""

from seo_metadata.services.metadata_generator import PageMetadata

MAX_SEO_SCORE = 3

TITLE_LENGTH_RANGE = (50, 60)
DESCRIPTION_LENGTH_RANGE = (150, 160)
MIN_KEYWORD_COUNT = 3


def seo_score(page: PageMetadata) -> int:
    """Score a page from 0 to 3.

    One point each for a 50-60 character title, a 150-160 character
    description, and at least three comma-separated keywords.
    """
    score = 0
    if TITLE_LENGTH_RANGE[0] <= len(page.title) <= TITLE_LENGTH_RANGE[1]:
        score += 1
    if DESCRIPTION_LENGTH_RANGE[0] <= len(page.description) <= DESCRIPTION_LENGTH_RANGE[1]:
        score += 1
    if len(page.keywords.split(",")) >= MIN_KEYWORD_COUNT:
        score += 1
    return score
