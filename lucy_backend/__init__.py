"""
Lucy AI Backend.

Thin proxy between the Senti wallet app and a hosted LLM:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, errors, and middleware
- services/  : Chat streaming, suggestions, and action detection
- llm/       : Provider client, prompts, and reply parsing
- models/    : Pydantic models for request/response schemas
"""

__version__ = "1.0.0"
