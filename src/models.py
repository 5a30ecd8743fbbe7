"""Pydantic models for Sureba API requests and responses."""

from pydantic import BaseModel, Field


# ============================================================================
# Request Models
# ============================================================================


class MessageRequest(BaseModel):
    """Request body carrying a chat message."""
    text: str = Field(..., min_length=1, max_length=2000, description="Raw message text")


class ConjugateRequest(BaseModel):
    """Request body for conjugation."""
    verb: str = Field(..., min_length=1, max_length=50, description="Dictionary form")
    negated: bool = Field(False, description="Produce the negative past conditional")


# ============================================================================
# Response Components
# ============================================================================


class TokenItem(BaseModel):
    """Single token as seen by desire detection."""
    surface: str = Field(..., description="Surface form")
    base: str = Field(..., description="Dictionary form")
    pos: str = Field(..., description="verb, adjective, auxiliary or other")
    pos_detail: str = Field("*", description="Conjugation type reported by the tokenizer")


# ============================================================================
# Response Models
# ============================================================================


class RespondResponse(BaseModel):
    """Response for /respond."""
    reply: str | None = Field(None, description="Suggestion to send back, if any")
    replied: bool = Field(..., description="Whether the message warrants a reply")


class AnalyzeResponse(BaseModel):
    """Response for /analyze."""
    tokens: list[TokenItem]
    desire: bool = Field(..., description="A desire expression was found")
    negated: bool = Field(False, description="The desire is negated")
    verb: str | None = Field(None, description="Extracted dictionary form, or する")
    conjugation_class: str | None = Field(None, description="Conjugation class of the verb")
    phrase: str | None = Field(None, description="Conjugated form or noun phrase used in the reply")
    reply: str | None = Field(None, description="Composed reply")


class ConjugateResponse(BaseModel):
    """Response for /conjugate."""
    verb: str = Field(..., description="Dictionary form")
    conjugation_class: str = Field(..., description="Conjugation class")
    negated: bool
    form: str = Field(..., description="Conditional or negative past conditional form")
