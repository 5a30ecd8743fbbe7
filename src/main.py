"""Sureba FastAPI application - answers "I want to X" with "then just X"."""

from contextlib import asynccontextmanager
from functools import partial
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request

from config import config
from models import (
    MessageRequest,
    ConjugateRequest,
    TokenItem,
    RespondResponse,
    AnalyzeResponse,
    ConjugateResponse,
)
from services.desire import SURU
from services.responder import DesireResponder
from services.tokenizer import SudachiTokenizer
from services.verb import classify, conjugate


# ============================================================================
# Application Lifespan
# ============================================================================


def create_responder() -> DesireResponder:
    """Build a responder backed by the configured Sudachi dictionary."""
    factory = partial(SudachiTokenizer, config.SUDACHI_DICT, config.SPLIT_MODE)
    return DesireResponder(factory)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the tokenizer dictionary on startup."""
    app.state.responder = create_responder()
    await app.state.responder.warm_up()
    yield


def get_responder(request: Request) -> DesireResponder:
    """Responder shared by every request of this application."""
    return request.app.state.responder


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Sureba API",
    description="""Desire-to-suggestion bot core for Japanese chat messages.

## Features
- **Desire detection**: finds 〜たい / 〜たくない expressions
- **Verb extraction**: recovers the dictionary form of the wanted action
- **Conjugation**: conditional (書けば) and negative past conditional (書かなかったら)
- **Replies**: じゃあ書けばええやん

## Endpoints
- `/respond` - Reply for a chat message (or none)
- `/analyze` - Every intermediate step of the pipeline
- `/conjugate` - Conditional forms of a dictionary-form verb
""",
    version=config.VERSION,
    lifespan=lifespan,
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": config.SERVICE_NAME, "version": config.VERSION}


@app.get("/health", tags=["Health"])
async def health(responder: DesireResponder = Depends(get_responder)) -> dict[str, Any]:
    """Detailed health check."""
    return {
        "status": "healthy" if responder.ready else "degraded",
        "tokenizer_ready": responder.ready,
        "version": config.VERSION,
    }


# ============================================================================
# Bot Endpoints
# ============================================================================


@app.post("/respond", response_model=RespondResponse, tags=["Bot"])
async def respond_endpoint(
    request: MessageRequest,
    responder: DesireResponder = Depends(get_responder),
) -> RespondResponse:
    """
    Reply to a chat message.

    Returns `replied: false` when the message expresses no desire, when no
    verb can be found, or when the tokenizer is unavailable.
    """
    reply = await responder.respond(request.text)
    return RespondResponse(reply=reply, replied=reply is not None)


@app.post("/analyze", response_model=AnalyzeResponse, tags=["Bot"])
async def analyze_endpoint(
    request: MessageRequest,
    responder: DesireResponder = Depends(get_responder),
) -> AnalyzeResponse:
    """
    Show every step of the pipeline for a message.

    Returns tokens, the desire signal, the extracted verb and its
    conjugation class, and the composed reply.
    """
    try:
        analysis = await responder.analyze(request.text)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Analysis failed: {e!s}") from e
    if analysis is None:
        raise HTTPException(status_code=503, detail="Tokenizer unavailable")

    return AnalyzeResponse(
        tokens=[TokenItem(**t.to_dict()) for t in analysis.tokens],
        desire=analysis.signal.present,
        negated=analysis.signal.negated,
        verb=SURU.value if analysis.verb is SURU else analysis.verb,
        conjugation_class=str(analysis.conjugation_class) if analysis.conjugation_class else None,
        phrase=analysis.phrase,
        reply=analysis.reply,
    )


# ============================================================================
# Conjugation Endpoints
# ============================================================================


@app.post("/conjugate", response_model=ConjugateResponse, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugateResponse:
    """
    Conjugate a dictionary-form verb into its conditional form.

    Unrecognized endings fall back to a generic suffix instead of failing.
    """
    return ConjugateResponse(
        verb=request.verb,
        conjugation_class=str(classify(request.verb)),
        negated=request.negated,
        form=conjugate(request.verb, request.negated),
    )


# ============================================================================
# Debug Endpoints
# ============================================================================


@app.post("/tokenize", tags=["Debug"])
async def tokenize_endpoint(
    request: MessageRequest,
    responder: DesireResponder = Depends(get_responder),
) -> dict[str, Any]:
    """Raw tokenizer output for debugging."""
    try:
        tokens = await responder.tokenize(request.text)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Tokenization failed: {e!s}") from e
    if tokens is None:
        raise HTTPException(status_code=503, detail="Tokenizer unavailable")
    return {"tokens": [t.to_dict() for t in tokens], "count": len(tokens)}


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
    )
