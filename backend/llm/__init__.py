"""LLM module - unified interface for language model interactions.

Usage:
    from llm import LLMService, LLMError

    llm = LLMService()
    response = await llm.generate(prompt, system, history=history)

Structure:
    - base.py: Abstract interface (BaseLLMService)
    - anthropic.py: Claude implementation (AnthropicService)
    - prompts/: Prompt templates for each document operation
"""

from llm.anthropic import AnthropicService
from llm.base import BaseLLMService, ChatMessage, LLMError

# Default provider - can be swapped by changing this alias
LLMService = AnthropicService

__all__ = [
    "BaseLLMService",
    "ChatMessage",
    "LLMService",
    "LLMError",
    "AnthropicService",
]
