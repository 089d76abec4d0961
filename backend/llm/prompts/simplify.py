"""Prompts for plain-language explanations of document excerpts."""

SIMPLIFY_SYSTEM_PROMPT = (
    "You are a helpful AI assistant that explains complex text in simple, "
    "easy-to-understand language."
)

SIMPLIFY_PROMPT = """You are helping users understand complex documents. Please simplify and explain the following text section in plain, easy-to-understand language.

FULL DOCUMENT CONTEXT:
{document_text}

COMPLEX TEXT TO SIMPLIFY:
{text}

INSTRUCTIONS:
1. Explain in simple terms that anyone can understand
2. Break down technical jargon or complex concepts
3. Use analogies or examples if helpful
4. Keep the explanation concise but complete
5. Maintain accuracy while simplifying

Simplified Explanation:"""
