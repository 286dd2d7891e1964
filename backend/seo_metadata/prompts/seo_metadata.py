"""Prompt for generating title, description and keywords for a page."""

SEO_METADATA_PROMPT = """Generate SEO metadata for the following webpage. Format your response in JSON.

URL: {url}
Content: {content}

Requirements:
1. Title: Create a clear, complete title that captures the main topic. Keep it concise.
2. Description: Write a natural, flowing description (150-160 characters) that summarizes the value proposition. DO NOT use numbered points or lists. Write in complete sentences.
3. Keywords: Extract 5 relevant keywords, separated by commas.

Example good descriptions:
- "Discover essential healthy eating strategies for overall well-being. Learn about balanced nutrition and smart food choices for a healthier lifestyle."
- "Explore comprehensive tips for maintaining a healthy diet, including nutrition guidance and practical meal planning strategies."

Bad description example (DO NOT USE):
- "Here are 10 tips for healthy eating: 1. Eat more vegetables 2. Choose whole grains 3. Limit sugar"

Response format:
{{
  "title": "Your complete, concise title here",
  "description": "Your natural, flowing description here",
  "keywords": "keyword1, keyword2, keyword3, keyword4, keyword5"
}}"""
