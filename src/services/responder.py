"""Desire responder: raw message text in, suggestion reply (or nothing) out."""

import asyncio
import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from services.composer import compose, extract_noun_phrase
from services.desire import SURU, DesireSignal, ExtractedVerb, detect, extract
from services.tokenizer import Token, Tokenizer, normalize_text
from services.verb import ConjugationClass, classify, conjugate


@dataclass(frozen=True, slots=True)
class DesireAnalysis:
    """Intermediate results of one pass through the pipeline."""

    text: str
    tokens: list[Token] = field(default_factory=list)
    signal: DesireSignal = DesireSignal()
    verb: ExtractedVerb = None
    conjugation_class: ConjugationClass | None = None
    phrase: str | None = None
    reply: str | None = None


def analyze_tokens(text: str, tokens: Sequence[Token]) -> DesireAnalysis:
    """Run detection, extraction, conjugation and composition on tokens.

    Args:
        text: The raw sentence, used to re-scan noun + する phrases.
        tokens: Tokenizer output for the same sentence.
    """
    tokens = list(tokens)
    signal = detect(tokens)
    if not signal.present:
        return DesireAnalysis(text, tokens, signal)

    verb = extract(tokens)
    if verb is None:
        return DesireAnalysis(text, tokens, signal)

    if verb is SURU:
        phrase = extract_noun_phrase(text, signal.negated)
        reply = compose(phrase, signal.negated, light_verb=True) if phrase else None
        return DesireAnalysis(text, tokens, signal, verb, ConjugationClass.SURU, phrase, reply)

    form = conjugate(verb, signal.negated)
    return DesireAnalysis(
        text, tokens, signal, verb, classify(verb), form, compose(form, signal.negated)
    )


def build_reply(text: str, tokens: Sequence[Token]) -> str | None:
    """Compose the reply for an already tokenized sentence."""
    return analyze_tokens(text, tokens).reply


class DesireResponder:
    """Answers desire expressions with a suggestion to just do (or not do) it.

    The tokenizer is built on first use, in a worker thread, exactly once.
    Concurrent first callers all await the same initialization. If it fails
    the failure is reported once and every message goes unanswered.
    """

    def __init__(self, tokenizer_factory: Callable[[], Tokenizer]) -> None:
        self._tokenizer_factory = tokenizer_factory
        self._init_task: asyncio.Future[Tokenizer] | None = None

    def _start_init(self) -> asyncio.Future[Tokenizer]:
        if self._init_task is None:
            print("📚 Loading tokenizer dictionary...")
            self._init_task = asyncio.ensure_future(asyncio.to_thread(self._tokenizer_factory))
            self._init_task.add_done_callback(self._report_init)
        return self._init_task

    @staticmethod
    def _report_init(task: asyncio.Future) -> None:
        if task.cancelled():
            print("⚠️ Tokenizer initialization was cancelled")
        elif task.exception() is not None:
            print(f"⚠️ Failed to initialize tokenizer: {task.exception()}")
        else:
            print("✓ Tokenizer ready")

    async def get_tokenizer(self) -> Tokenizer | None:
        """Await the shared tokenizer, or None if it could not be built."""
        task = self._start_init()
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            if not task.done():
                raise
            return None
        except Exception:
            # Already reported by _report_init
            return None

    async def warm_up(self) -> bool:
        """Start (or join) tokenizer initialization; True if it is usable."""
        return await self.get_tokenizer() is not None

    @property
    def ready(self) -> bool:
        task = self._init_task
        return task is not None and task.done() and not task.cancelled() and task.exception() is None

    async def tokenize(self, text: str) -> list[Token] | None:
        """Tokenize text with the shared tokenizer, or None if unavailable."""
        tokenizer = await self.get_tokenizer()
        if tokenizer is None:
            return None
        result = tokenizer.tokenize(text)
        if inspect.isawaitable(result):
            result = await result
        return list(result)

    async def analyze(self, raw_text: str) -> DesireAnalysis | None:
        """Analyze a message, or None if the tokenizer is unavailable."""
        text = normalize_text(raw_text)
        tokens = await self.tokenize(text)
        if tokens is None:
            return None
        return analyze_tokens(text, tokens)

    async def respond(self, raw_text: str) -> str | None:
        """Return the suggestion for a message, or None for no reply."""
        try:
            analysis = await self.analyze(raw_text)
        except Exception as e:
            print(f"⚠️ Failed to analyze message: {e}")
            return None
        return analysis.reply if analysis else None
