from __future__ import annotations

import asyncio
from typing import Any

import pytest

from core.trans.fetcher import TranslationFetcher
from core.trans.interface import TransInterface, TranslationRateLimitError, TranslationRequestError
from models.language_models import Pairing, ScoredCandidate
from models.translation_models import FetchOutcome

EN = ScoredCandidate("en", "English", 100)
DE = ScoredCandidate("de", "German", 90)
FR = ScoredCandidate("fr", "French", 80)
UK = ScoredCandidate("uk", "Ukrainian", 100)


class DelayedEngine(TransInterface):
    """Answers each destination after its own delay; destinations in ``failing`` raise."""

    def __init__(self, delays: dict[str, float], failing: dict[str, Exception] | None = None) -> None:
        self.delays: dict[str, float] = delays
        self.failing: dict[str, Exception] = failing or {}
        self.calls: list[tuple[str, str, str]] = []
        self.completed: list[str] = []

    @staticmethod
    def fetch_engine_name() -> str:
        return ""

    def initialize(self, config) -> None:
        _ = config

    async def fetch(self, content: str, tgt_lang: str, src_lang: str) -> Any:
        self.calls.append((content, tgt_lang, src_lang))
        await asyncio.sleep(self.delays.get(tgt_lang, 0))
        self.completed.append(tgt_lang)
        if tgt_lang in self.failing:
            raise self.failing[tgt_lang]
        return [[[f"{content}:{tgt_lang}"]], None, src_lang]

    async def close(self) -> None:
        pass


@pytest.mark.asyncio
async def test_outcomes_follow_pairing_order_not_completion_order() -> None:
    engine = DelayedEngine({"uk": 0.05, "de": 0.0, "fr": 0.02})
    pairings = [Pairing(EN, UK, 200), Pairing(EN, DE, 190), Pairing(EN, FR, 180)]

    outcomes: list[FetchOutcome] = await TranslationFetcher(engine).fetch_all(pairings, "Hi")

    assert engine.completed == ["de", "fr", "uk"]
    assert [o.pairing for o in outcomes] == pairings
    assert [o.body[0][0][0] for o in outcomes] == ["Hi:uk", "Hi:de", "Hi:fr"]


@pytest.mark.asyncio
async def test_failure_does_not_affect_siblings() -> None:
    engine = DelayedEngine(
        {"uk": 0.02},
        failing={"de": TranslationRequestError("boom"), "fr": TranslationRateLimitError("slow down")},
    )
    pairings = [Pairing(None, DE, 90), Pairing(None, UK, 100), Pairing(None, FR, 80)]

    outcomes: list[FetchOutcome] = await TranslationFetcher(engine).fetch_all(pairings, "Hi")

    assert [o.succeeded for o in outcomes] == [False, True, False]
    assert isinstance(outcomes[0].error, TranslationRequestError)
    assert isinstance(outcomes[2].error, TranslationRateLimitError)
    assert outcomes[1].body == [[["Hi:uk"]], None, "auto"]


@pytest.mark.asyncio
async def test_requests_use_auto_for_missing_source() -> None:
    engine = DelayedEngine({})

    await TranslationFetcher(engine).fetch_all([Pairing(None, UK, 100), Pairing(EN, DE, 190)], "text")

    assert engine.calls == [("text", "uk", "auto"), ("text", "de", "en")]


@pytest.mark.asyncio
async def test_requests_run_concurrently() -> None:
    engine = DelayedEngine({"uk": 0.2, "de": 0.2, "fr": 0.2})
    pairings = [Pairing(None, UK, 100), Pairing(None, DE, 90), Pairing(None, FR, 80)]

    loop = asyncio.get_running_loop()
    started: float = loop.time()
    await TranslationFetcher(engine).fetch_all(pairings, "Hi")

    assert loop.time() - started < 0.5


@pytest.mark.asyncio
async def test_no_pairings_no_requests() -> None:
    engine = DelayedEngine({})

    assert await TranslationFetcher(engine).fetch_all([], "Hi") == []
    assert engine.calls == []


@pytest.mark.asyncio
async def test_unexpected_error_is_isolated_to_its_request() -> None:
    engine = DelayedEngine({"en": 0.01}, failing={"uk": RecursionError("too deep")})
    pairings = [Pairing(None, UK, 100), Pairing(None, EN, 100)]

    outcomes: list[FetchOutcome] = await TranslationFetcher(engine).fetch_all(pairings, "Hi")

    assert [o.succeeded for o in outcomes] == [False, True]
    assert isinstance(outcomes[0].error, RecursionError)
    assert outcomes[1].body[0][0][0] == "Hi:en"
