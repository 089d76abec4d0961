"""Prompts for document summaries."""

SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful AI assistant that creates clear and concise document summaries."
)

SUMMARY_PROMPT = """Please provide a concise summary of the following document. Include:
1. Main purpose or objective
2. Key points (3-5 bullet points)
3. Important conclusions or takeaways

Document:
{document_text}

Summary:"""
