"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request validation and parsing
- Response formatting (JSON and Server-Sent Events)
- Error handling
- Route definitions
"""
