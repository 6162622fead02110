SYSTEM_INSTRUCTION = (
    "You are an expert content summarizer specializing in creating concise, "
    "well-structured summaries for educational and informational videos."
)

summary_template = """Please analyze the following YouTube video transcript and create a comprehensive summary.

Video Title: {title}

Transcript:
{transcript}

Please provide your response in the following JSON format:
{{
  "title": "A concise, descriptive title for the summary",
  "summary": "A well-structured summary with bullet points covering the main topics, key insights, and important details. Use clear, concise language and organize information logically.",
  "tags": ["tag1", "tag2", "tag3", "tag4", "tag5"]
}}

Guidelines:
- Keep the summary between 200-500 words
- Use bullet points for better readability
- Focus on the most important and actionable information
- Include key statistics, dates, or specific details when relevant
- Choose 3-5 relevant tags from categories like: Education, Technology, Business, Health, Science, Politics, Entertainment, Sports, News, Tutorial, Review, Analysis, etc.
- Make the summary suitable for someone who wants to quickly understand the video's content

Respond only with valid JSON, no additional text."""


def create_summary_prompt(transcript: str, title: str) -> str:
    """Fill the summary template. Same prompt for every provider."""
    return summary_template.format(title=title, transcript=transcript)
