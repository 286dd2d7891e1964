"""Prompt for free-text SEO suggestions on page content."""

CONTENT_ANALYSIS_PROMPT = """Analyze the following content for SEO optimization:
{content}

Provide 3-5 suggestions to improve the content for better SEO. Format each suggestion as a separate line."""
