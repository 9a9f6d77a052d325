"""
Lucy Prompts - persona and classification prompts for the Senti wallet.

The chat prompt is the static persona, optionally followed by the user's
wallet snapshot. Suggestion and action prompts ask for bare JSON so the
replies can be parsed directly.
"""
import json
from typing import Any, Dict, List, Optional, Sequence

from lucy_backend.models.chat import ChatMessage, WalletContext


LUCY_SYSTEM_PROMPT = """You are Lucy, an AI assistant for Senti - a modern crypto wallet app built on Solana. Your role is to help users:

- Check balances and understand their portfolio
- Find and recommend the best vaults/yield opportunities
- Send and receive money easily
- Understand DeFi concepts in simple terms
- Manage savings goals and budgets
- Explain fees and transactions

Key features to highlight:
- Global spending of your crypto wherever you are
- Cheaper and faster cross border transactions
- Receive payment anywhere
- Private and secured
- Social layer to chat and transact with friends in a single click
- Layer 2 technology for fast, cheap swaps
- Easy vault deposits for earning yield
- Simple savings goals with automated tracking
- Budget insights and spending alerts

Personality:
- Friendly, helpful, and encouraging
- Use simple language, avoid jargon
- Be concise and compact - keep responses short (2-3 sentences max)
- Celebrate user wins and progress
- Proactively suggest ways to grow their money

CRITICAL FORMATTING RULES:
- NEVER use markdown formatting (no asterisks, no bold, no italic)
- NEVER use special characters for emphasis
- Use plain text only - write naturally without any markup
- Keep responses compact and to the point
- Break long responses into short, digestible sentences

IMPORTANT RULES:
- Never give specific financial advice or guarantee returns
- Always mention risks when discussing yield/vaults
- Be accurate about fees and APY rates
- If you don't know something, say so
- Format numbers as USD with $ symbol (e.g., $1,234.56)
- Avoid using emojis"""

SUGGESTIONS_SYSTEM_PROMPT = (
    "You are Lucy, an AI assistant for Senti wallet. Generate 2-3 short, actionable "
    "follow-up suggestions based on the user's last message. Return ONLY a JSON array "
    "of strings, no other text."
)

ACTION_CHECK_PROMPT = (
    "You are Lucy, an AI assistant for Senti wallet. Determine if the user's message "
    "requires executing an action. Return ONLY a JSON object with this format: "
    '{"action": "send" | "deposit" | "swap" | "none", "confidence": 0-1}'
)


def _context_dict(wallet_context: Optional[WalletContext]) -> Optional[Dict[str, Any]]:
    if wallet_context is None:
        return None
    return wallet_context.to_prompt_dict()


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def build_system_prompt(wallet_context: Optional[WalletContext] = None) -> str:
    """
    Get the system prompt for a chat reply.

    Args:
        wallet_context: Optional wallet snapshot from the client

    Returns:
        The persona prompt, with the wallet snapshot appended when the
        client sent at least one field
    """
    context = _context_dict(wallet_context)
    if not context:
        return LUCY_SYSTEM_PROMPT

    context_json = json.dumps(context, indent=2, ensure_ascii=False)
    return (
        f"{LUCY_SYSTEM_PROMPT}\n\n"
        f"CURRENT WALLET CONTEXT:\n{context_json}\n\n"
        f"Use this context to personalize your responses."
    )


def format_messages(messages: Sequence[ChatMessage]) -> List[Dict[str, str]]:
    """Convert wallet-app transcript turns into provider chat messages."""
    return [
        {
            "role": "user" if msg.type == "user" else "assistant",
            "content": msg.text,
        }
        for msg in messages
    ]


def get_suggestions_user_prompt(
    last_message: str,
    wallet_context: Optional[WalletContext] = None,
) -> str:
    """User prompt for the follow-up suggestions call."""
    context_json = _compact_json(_context_dict(wallet_context))
    return (
        f'User said: "{last_message}"\n\n'
        f"Wallet context: {context_json}\n\n"
        f"Generate 2-3 follow-up suggestions (max 5 words each)."
    )


def get_action_check_user_prompt(
    message: str,
    wallet_context: Optional[WalletContext] = None,
) -> str:
    """User prompt for the action detection call."""
    context_json = _compact_json(_context_dict(wallet_context))
    return (
        f'User message: "{message}"\n\n'
        f"Wallet context: {context_json}\n\n"
        f"Should we execute an action?"
    )
