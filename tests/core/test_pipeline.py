from __future__ import annotations

import asyncio
from typing import Any

import pytest

from core.pipeline import TranslatePipeline
from core.shared_data import SharedData
from core.trans.interface import TransInterface, TranslationRequestError
from models.config_models import Config
from models.translation_models import TranslationResult


class RecordingEngine(TransInterface):
    """Echo engine: returns ``<text>@<tgt>`` and reports ``detected`` as source language."""

    def __init__(self, detected: str | None = "en", failing: set[str] | None = None) -> None:
        self.detected: str | None = detected
        self.failing: set[str] = failing or set()
        self.calls: list[tuple[str, str, str]] = []

    @staticmethod
    def fetch_engine_name() -> str:
        return ""

    def initialize(self, config) -> None:
        _ = config

    async def fetch(self, content: str, tgt_lang: str, src_lang: str) -> Any:
        self.calls.append((content, tgt_lang, src_lang))
        await asyncio.sleep(0)
        if tgt_lang in self.failing:
            msg = f"{tgt_lang} unavailable"
            raise TranslationRequestError(msg)
        return [[[f"{content}@{tgt_lang}"]], None, self.detected]

    async def close(self) -> None:
        pass


def _config(prefix: str = "", delimiter: str = ">", max_entries: int = 3, languages: list[str] | None = None) -> Config:
    config = Config()
    config.TRANSLATE.PREFIX = prefix
    config.TRANSLATE.LANGUAGE_DELIMITER = delimiter
    config.TRANSLATE.MAX_ENTRIES = max_entries
    config.TRANSLATE.LANGUAGES = languages or []
    return config


def _pipeline(config: Config, engine: TransInterface) -> TranslatePipeline:
    return TranslatePipeline(SharedData.create(config, engine))


@pytest.mark.asyncio
async def test_explicit_pair_sends_one_request() -> None:
    engine = RecordingEngine(detected="uk")
    pipeline = _pipeline(_config(max_entries=2, languages=["en", "uk"]), engine)

    results: list[TranslationResult] = await pipeline.resolve("en>uk Hello")

    assert engine.calls == [("Hello", "uk", "en")]
    assert len(results) == 1
    assert results[0].title == "Hello@uk"
    assert "Ukrainian" in results[0].description


@pytest.mark.asyncio
async def test_explicit_pair_on_full_table_sends_one_request() -> None:
    engine = RecordingEngine(detected="en")
    pipeline = _pipeline(_config(max_entries=2), engine)

    results: list[TranslationResult] = await pipeline.resolve("en>uk Hello")

    assert engine.calls == [("Hello", "uk", "en")]
    assert results == [TranslationResult(title="Hello@uk", description="English → Ukrainian")]


@pytest.mark.asyncio
async def test_round_trip_of_service_body() -> None:
    class UkrainianEngine(RecordingEngine):
        async def fetch(self, content: str, tgt_lang: str, src_lang: str) -> Any:
            self.calls.append((content, tgt_lang, src_lang))
            return [[["Привіт"]], None, "uk"]

    pipeline = _pipeline(_config(languages=["en", "uk"]), UkrainianEngine())

    results: list[TranslationResult] = await pipeline.resolve("en>uk Hello")

    assert results == [TranslationResult(title="Привіт", description="Ukrainian → Ukrainian")]


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["", "   ", "en>uk", "en>uk   ", "Hello"])
async def test_no_text_means_no_requests(query: str) -> None:
    engine = RecordingEngine()
    pipeline = _pipeline(_config(), engine)

    assert await pipeline.resolve(query) == []
    assert engine.calls == []


@pytest.mark.asyncio
async def test_missing_prefix_means_no_requests() -> None:
    engine = RecordingEngine()
    pipeline = _pipeline(_config(prefix="tr "), engine)

    assert await pipeline.resolve("en>uk Hello") == []
    assert engine.calls == []


@pytest.mark.asyncio
async def test_unmatched_destination_means_no_requests() -> None:
    engine = RecordingEngine()
    pipeline = _pipeline(_config(), engine)

    assert await pipeline.resolve("en>qqqq Hello") == []
    assert engine.calls == []


@pytest.mark.asyncio
async def test_unmatched_source_means_no_requests() -> None:
    engine = RecordingEngine()
    pipeline = _pipeline(_config(), engine)

    assert await pipeline.resolve("qqqq>uk Hello") == []
    assert engine.calls == []


@pytest.mark.asyncio
async def test_destination_only_uses_auto_detect() -> None:
    engine = RecordingEngine(detected="en")
    pipeline = _pipeline(_config(languages=["en", "uk", "de"]), engine)

    results: list[TranslationResult] = await pipeline.resolve("ukr Hello")

    assert engine.calls == [("Hello", "uk", "auto")]
    assert results == [TranslationResult(title="Hello@uk", description="English → Ukrainian (detected)")]


@pytest.mark.asyncio
async def test_empty_source_token_uses_auto_detect() -> None:
    engine = RecordingEngine()
    pipeline = _pipeline(_config(languages=["en", "uk"]), engine)

    await pipeline.resolve(">uk Hello")

    assert engine.calls == [("Hello", "uk", "auto")]


@pytest.mark.asyncio
async def test_fan_out_is_capped_by_max_entries() -> None:
    engine = RecordingEngine()
    pipeline = _pipeline(_config(max_entries=2), engine)

    results: list[TranslationResult] = await pipeline.resolve("en>e Hello")

    assert len(engine.calls) <= 2
    assert len(results) <= 2


@pytest.mark.asyncio
async def test_best_pairing_comes_first() -> None:
    engine = RecordingEngine()
    pipeline = _pipeline(_config(max_entries=5), engine)

    results: list[TranslationResult] = await pipeline.resolve("en>uk Hello")

    assert engine.calls[0] == ("Hello", "uk", "en")
    assert results[0].title == "Hello@uk"


@pytest.mark.asyncio
async def test_failed_request_keeps_other_results() -> None:
    engine = RecordingEngine(failing={"ro"})
    pipeline = _pipeline(_config(max_entries=3, languages=["it", "ro", "uk"]), engine)

    results: list[TranslationResult] = await pipeline.resolve("ian Hello")

    assert sorted(call[1] for call in engine.calls) == ["it", "ro", "uk"]
    assert sorted(r.title for r in results) == ["Hello@it", "Hello@uk"]


@pytest.mark.asyncio
async def test_results_are_stable_across_runs() -> None:
    pipeline = _pipeline(_config(max_entries=5), RecordingEngine())

    first: list[TranslationResult] = await pipeline.resolve("en>an Hello")
    second: list[TranslationResult] = await pipeline.resolve("en>an Hello")

    assert first == second


def test_plan_exposes_ranked_pairings() -> None:
    pipeline = _pipeline(_config(max_entries=2, languages=["en", "uk"]), RecordingEngine())

    pairings, text = pipeline.plan("en>uk Hello")

    assert text == "Hello"
    assert [(p.source_code, p.destination.code, p.combined_score) for p in pairings] == [("en", "uk", 200)]


@pytest.mark.asyncio
async def test_malformed_body_keeps_other_results() -> None:
    class PartlyBrokenEngine(RecordingEngine):
        async def fetch(self, content: str, tgt_lang: str, src_lang: str) -> Any:
            if tgt_lang == "it":
                self.calls.append((content, tgt_lang, src_lang))
                return [["not", "segments"]]
            return await super().fetch(content, tgt_lang, src_lang)

    engine = PartlyBrokenEngine(failing={"ro"})
    pipeline = _pipeline(_config(max_entries=3, languages=["it", "ro", "uk"]), engine)

    results: list[TranslationResult] = await pipeline.resolve("ian Hello")

    assert len(engine.calls) == 3
    assert [r.title for r in results] == ["Hello@uk"]
