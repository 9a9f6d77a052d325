"""
Request and Response models for the assistant API.

Field names follow the wallet app's camelCase JSON via aliases.
Required fields are declared Optional so that a missing value reaches the
route's own validation and yields a 400 with a readable message.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


ActionName = Literal["send", "deposit", "swap", "none"]

# Wallet values are echoed into prompts as the client sent them, so any
# JSON value is accepted (numbers, formatted strings, null)
WalletValue = Any


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ChatMessage(BaseModel):
    """A single transcript turn as rendered by the wallet app."""
    type: Literal["user", "lucy"] = Field(
        ...,
        description="Who wrote the message: the user or Lucy"
    )
    text: str = Field(..., description="Message text")


class TokenBalances(BaseModel):
    model_config = ConfigDict(extra="allow")

    usdc: Optional[WalletValue] = None
    usdt: Optional[WalletValue] = None
    sol: Optional[WalletValue] = None


class Vault(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[WalletValue] = None
    balance: Optional[WalletValue] = None
    apy: Optional[WalletValue] = None


class SavingsGoal(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[WalletValue] = None
    target: Optional[WalletValue] = None
    current: Optional[WalletValue] = None


class WalletContext(_CamelModel):
    """
    Snapshot of the user's wallet sent along with each request.

    Unknown keys are kept and no value is coerced, so the prompt sees
    exactly what the client sent.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    total_balance: Optional[WalletValue] = Field(default=None, alias="totalBalance")
    balances: Optional[TokenBalances] = None
    vaults: Optional[List[Vault]] = None
    savings_goals: Optional[List[SavingsGoal]] = Field(default=None, alias="savingsGoals")

    def to_prompt_dict(self) -> Dict[str, Any]:
        """Return only the keys the client actually sent, in wire format."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ChatRequest(_CamelModel):
    """Request model for the /api/chat endpoint."""
    messages: Optional[List[ChatMessage]] = Field(
        default=None,
        description="Full conversation transcript, oldest first",
    )
    wallet_context: Optional[WalletContext] = Field(default=None, alias="walletContext")


class SuggestionsRequest(_CamelModel):
    """Request model for the /api/suggestions endpoint."""
    last_message: Optional[str] = Field(
        default=None,
        alias="lastMessage",
        description="The user's most recent message",
        examples=["What is my balance?"],
    )
    wallet_context: Optional[WalletContext] = Field(default=None, alias="walletContext")


class SuggestionsResponse(BaseModel):
    """Follow-up suggestions shown as quick replies."""
    suggestions: List[str] = Field(default_factory=list)


class ActionCheckRequest(_CamelModel):
    """Request model for the /api/check-action endpoint."""
    message: Optional[str] = Field(
        default=None,
        description="The user's message to classify",
        examples=["Send $20 to Alex"],
    )
    wallet_context: Optional[WalletContext] = Field(default=None, alias="walletContext")


class ActionCheckResponse(BaseModel):
    """Detected wallet action for a user message."""
    action: ActionName = "none"
    confidence: float = Field(default=0, ge=0, le=1)


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    status: str = Field(default="ok")
    service: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    message: str
    details: Optional[str] = None
