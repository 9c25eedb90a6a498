from __future__ import annotations

import pytest

from core.lang.table import LANGUAGES, LanguageTable, UnknownLanguageCodeError
from models.language_models import LanguageEntry


def test_default_table_keeps_definition_order() -> None:
    table = LanguageTable.default()

    assert len(table) == len(LANGUAGES)
    assert [entry.code for entry in table] == list(LANGUAGES)


def test_subset_keeps_table_order_and_ignores_case() -> None:
    table = LanguageTable.subset(["UK", "en"])

    assert [entry.code for entry in table] == ["en", "uk"]


def test_empty_subset_is_full_table() -> None:
    assert len(LanguageTable.subset([])) == len(LANGUAGES)


def test_subset_rejects_unknown_codes() -> None:
    with pytest.raises(UnknownLanguageCodeError):
        LanguageTable.subset(["en", "xx"])


def test_duplicate_codes_are_rejected() -> None:
    with pytest.raises(ValueError):
        LanguageTable([LanguageEntry("en", "English"), LanguageEntry("en", "Anglais")])


def test_display_name_lookup() -> None:
    table = LanguageTable.default()

    assert table.display_name("uk") == "Ukrainian"
    assert table.display_name("ZH-CN") == "Chinese (Simplified)"
    assert table.display_name("auto") == "Auto-detect"
    assert table.display_name("xx") == "xx"


def test_contains() -> None:
    table = LanguageTable.subset(["en"])

    assert "en" in table
    assert "EN" in table
    assert "uk" not in table
    assert None not in table
