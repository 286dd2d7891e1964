"""Deterministic text cleanup used to build fallback metadata.

Nothing here calls out to a model. These transforms turn raw page content or
noisy model output into keyword lists and short, flowing descriptions.
"""

import re


class TextNormalizer:
    """Clean descriptions and pull keyword candidates from page content."""

    # Words that carry no topical signal
    STOP_WORDS = frozenset({
        "and", "the", "for", "in", "to", "of", "a", "with", "by", "on", "your",
    })

    MIN_KEYWORD_LENGTH = 4
    MAX_KEYWORDS = 5

    # Sentence boundary: terminator followed by whitespace
    SENTENCE_SPLIT = re.compile(r"[.?!]\s+")
    MAX_SENTENCES = 2

    def extract_keywords(self, content: str) -> str:
        """Pick up to five keyword candidates in first-seen order.

        Args:
            content: Raw page content

        Returns:
            Keywords joined with ", " (empty string for empty input)
        """
        text = re.sub(r"[^\w\s]", "", content.lower())
        words = [
            word for word in text.split()
            if len(word) >= self.MIN_KEYWORD_LENGTH and word not in self.STOP_WORDS
        ]
        unique_words = list(dict.fromkeys(words))  # Remove duplicates, preserve order
        return ", ".join(unique_words[:self.MAX_KEYWORDS])

    def clean_description(self, text: str) -> str:
        """Strip list formatting and normalize spacing."""
        text = re.sub(r"\d+\.\s+", "", text)  # Numbered points
        text = re.sub(
            r"here are \d+ tips for",
            "Discover essential tips for",
            text,
            flags=re.IGNORECASE,
        )
        text = re.sub(r"\s+", " ", text)
        text = re.sub(r"\s*\.\s*", ". ", text)
        text = re.sub(r"\s*,\s*", ", ", text)
        text = re.sub(r"\s+", " ", text)
        return text.strip()

    def format_description(self, description: str) -> str:
        """Turn arbitrary text into at most two sentences.

        List-style content is flattened into prose, the first two sentences
        are kept and the result ends with exactly one terminator.

        Args:
            description: Raw description text

        Returns:
            Formatted description, or the cleaned text when no sentence
            fragments survive
        """
        if not description:
            return ""
        cleaned = self.clean_description(description)

        parts = self.SENTENCE_SPLIT.split(cleaned)[:self.MAX_SENTENCES]
        joined = ". ".join(part.strip() for part in parts if part.strip())

        body = joined.rstrip(".")
        if not body:
            return cleaned
        if body.endswith(("?", "!")):
            return body
        return f"{body}."


# Singleton instance for convenience
_normalizer = TextNormalizer()


def extract_keywords(content: str) -> str:
    """Convenience function to extract keywords from content."""
    return _normalizer.extract_keywords(content)


def clean_description(text: str) -> str:
    """Convenience function to clean description text."""
    return _normalizer.clean_description(text)


def format_description(description: str) -> str:
    """Convenience function to format a description."""
    return _normalizer.format_description(description)
