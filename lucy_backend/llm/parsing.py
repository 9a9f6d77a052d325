"""Parsing helpers for JSON replies from the classifier prompts."""
import json
from typing import Any


def extract_json(text: str) -> Any:
    """
    Parse a model reply that should contain a single JSON value.

    Small models sometimes wrap the answer in a markdown code fence;
    the fence is stripped before parsing.

    Raises:
        ValueError: If the reply is empty or not valid JSON
    """
    cleaned = (text or "").strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        # Drop the opening fence (with optional language tag) and the closing one
        body = lines[1:]
        if body and body[-1].strip().startswith("```"):
            body = body[:-1]
        cleaned = "\n".join(body).strip()

    if not cleaned:
        raise ValueError("Empty model reply")

    # json.JSONDecodeError is a ValueError subclass
    return json.loads(cleaned)
