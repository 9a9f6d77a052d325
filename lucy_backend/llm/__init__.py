"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Groq (streaming and non-streaming)
- Parsing of JSON classifier replies
"""
from lucy_backend.core.exceptions import LLMError
from lucy_backend.llm.client import LLMClient, get_llm_client

__all__ = [
    "LLMClient",
    "LLMError",
    "get_llm_client",
]
