"""Prompts for presentation generation."""

import json

from src.models.presentation import Slide

# Only this many leading slides are sent to the enhancement stage
ENHANCEMENT_SLIDE_LIMIT = 5


STRUCTURE_SYSTEM_PROMPT = """You are an expert presentation designer. Your task is to create a detailed, professional slideshow structure.

You MUST respond with ONLY valid JSON, no markdown, no explanations. The JSON structure should be:
{
  "title": "Main presentation title",
  "subtitle": "A compelling subtitle",
  "slides": [
    {
      "type": "title|content|comparison|chart|quote|image|conclusion",
      "title": "Slide title",
      "content": ["Bullet point 1", "Bullet point 2"],
      "notes": "Speaker notes",
      "chartData": { "type": "bar|line|pie|doughnut", "labels": [], "values": [], "label": "Dataset name" },
      "imageSearch": "search query for relevant image",
      "quote": { "text": "Quote text", "author": "Author name" },
      "leftColumn": { "title": "", "content": [] },
      "rightColumn": { "title": "", "content": [] }
    }
  ],
  "theme": {
    "primaryColor": "#hex",
    "secondaryColor": "#hex",
    "backgroundColor": "#hex",
    "textColor": "#hex"
  }
}

Guidelines:
- Create 8-15 slides depending on topic complexity
- Use varied slide types to keep it engaging
- Include at least 2 charts with realistic data when relevant
- Add image search queries for visual slides
- Use professional, modern color schemes
- Include speaker notes for each slide
- Make content concise but informative"""


ENHANCEMENT_SYSTEM_PROMPT = """You are enhancing a presentation. Review the content and add:
1. More detailed speaker notes
2. Transition suggestions between slides
3. Key takeaways for conclusion

Respond with ONLY valid JSON in this exact format:
{
  "enhancedSlides": [
    {
      "slideIndex": 0,
      "enhancedNotes": "Detailed speaker notes",
      "transition": "Suggested transition to next slide"
    }
  ],
  "keyTakeaways": ["Takeaway 1", "Takeaway 2", "Takeaway 3"]
}"""


def build_structure_prompt(topic: str) -> str:
    """Build the user prompt for the structure stage."""
    return f"""Create a comprehensive, professional presentation about: "{topic}"

Make it visually engaging with charts, images, and varied layouts. Include realistic data for any charts. Make it presentation-ready."""


def build_enhancement_prompt(slides: list[Slide]) -> str:
    """Build the user prompt for the enhancement stage from the leading slides."""
    leading = [s.to_wire() for s in slides[:ENHANCEMENT_SLIDE_LIMIT]]
    return f"Enhance this presentation: {json.dumps(leading)}"
