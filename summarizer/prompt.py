# summarizer/prompt.py

MAX_CONTENT_CHARS = 10000

SUMMARY_PROMPT = """Please provide a concise summary of the following article in 3-5 bullet points. Focus on the main ideas and key takeaways.

Title: {title}

Content: {content}

Requirements:
- Use the same language as the article
- Keep each point under 50 words
- Focus on facts, not opinions"""


def build_prompt(title: str, content: str) -> str:
    if len(content) > MAX_CONTENT_CHARS:
        content = content[:MAX_CONTENT_CHARS] + "..."
    return SUMMARY_PROMPT.format(title=title, content=content)
