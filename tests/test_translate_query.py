from __future__ import annotations

import json
from typing import Any

import pytest

import translate_query
from models.translation_models import TranslationResult

RESULTS: list[TranslationResult] = [
    TranslationResult(title="Привіт", description="English → Ukrainian"),
    TranslationResult(title="Hallo", description="English → German"),
]


class DummyPlugin:
    instances: list[DummyPlugin] = []
    results: list[TranslationResult] = RESULTS

    def __init__(self, config_dir: str, args: dict[str, Any]) -> None:
        self.config_dir = config_dir
        self.args = args
        self.queries: list[str] = []
        self.closed = False

    @classmethod
    def init(cls, config_dir: str, **args) -> DummyPlugin:
        plugin = cls(config_dir, args)
        cls.instances.append(plugin)
        return plugin

    def get_matches(self, query: str) -> list[TranslationResult]:
        self.queries.append(query)
        return list(self.results)

    @staticmethod
    def handler(selection: TranslationResult) -> bytes:
        return selection.title.encode("utf-8")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def dummy_plugin(monkeypatch: pytest.MonkeyPatch) -> type[DummyPlugin]:
    monkeypatch.setattr(DummyPlugin, "instances", [])
    monkeypatch.setattr(DummyPlugin, "results", RESULTS)
    monkeypatch.setattr(translate_query, "TranslatePlugin", DummyPlugin)
    return DummyPlugin


def test_parse_arguments() -> None:
    args = translate_query.parse_arguments(["en>uk Hello", "--config-dir", "/tmp/cfg", "--json", "--select", "2"])

    assert args.query == "en>uk Hello"
    assert args.config_dir == "/tmp/cfg"
    assert args.json is True
    assert args.select == 2
    assert args.debug is False


def test_parse_arguments_requires_query(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        translate_query.parse_arguments([])

    assert excinfo.value.code == 2
    assert "usage" in capsys.readouterr().err


def test_render_text() -> None:
    rendered: str = translate_query.render(RESULTS, as_json=False)

    assert rendered.splitlines() == [
        "1. Привіт",
        "   English → Ukrainian",
        "2. Hallo",
        "   English → German",
    ]


def test_render_json() -> None:
    decoded = json.loads(translate_query.render(RESULTS[:1], as_json=True))

    assert decoded == [{"title": "Привіт", "description": "English → Ukrainian"}]


def test_main_prints_results(dummy_plugin: type[DummyPlugin], capsys: pytest.CaptureFixture[str]) -> None:
    exit_code: int = translate_query.main(["en>uk Hello", "--config-dir", "cfg", "--debug"])

    assert exit_code == 0
    plugin: DummyPlugin = dummy_plugin.instances[0]
    assert plugin.config_dir == "cfg"
    assert plugin.args == {"debug": True}
    assert plugin.queries == ["en>uk Hello"]
    assert plugin.closed is True
    assert "1. Привіт" in capsys.readouterr().out


def test_main_select_writes_title(dummy_plugin: type[DummyPlugin], capsys: pytest.CaptureFixture[str]) -> None:
    _ = dummy_plugin
    exit_code: int = translate_query.main(["en>uk Hello", "--select", "2"])

    assert exit_code == 0
    assert capsys.readouterr().out == "Hallo"


def test_main_select_out_of_range(dummy_plugin: type[DummyPlugin], capsys: pytest.CaptureFixture[str]) -> None:
    _ = dummy_plugin
    exit_code: int = translate_query.main(["en>uk Hello", "--select", "3"])

    assert exit_code == 1
    assert "no result number 3" in capsys.readouterr().err


def test_main_without_results(
    dummy_plugin: type[DummyPlugin], monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(dummy_plugin, "results", [])

    assert translate_query.main(["zz Hello"]) == 1
    assert "No translations." in capsys.readouterr().err
