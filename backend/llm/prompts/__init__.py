"""LLM prompts for various use cases."""

from llm.prompts.document_qa import DOCUMENT_QA_SYSTEM_PROMPT
from llm.prompts.simplify import SIMPLIFY_PROMPT, SIMPLIFY_SYSTEM_PROMPT
from llm.prompts.summary import SUMMARY_PROMPT, SUMMARY_SYSTEM_PROMPT

__all__ = [
    "DOCUMENT_QA_SYSTEM_PROMPT",
    "SIMPLIFY_PROMPT",
    "SIMPLIFY_SYSTEM_PROMPT",
    "SUMMARY_PROMPT",
    "SUMMARY_SYSTEM_PROMPT",
]
