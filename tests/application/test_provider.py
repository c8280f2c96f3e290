import pytest

from wikicomplete.application.detector import ContextDetector
from wikicomplete.application.provider import SuggestionProvider, suggestion_word
from wikicomplete.config import DEFAULT_TRIGGERS
from wikicomplete.domain.triggers import TriggerRegistry
from wikicomplete.domain.types import CompletionContext

from conftest import FakeExecutor

DETECTOR = ContextDetector(TriggerRegistry.from_mapping(DEFAULT_TRIGGERS))


def detect(text: str) -> CompletionContext:
    context = DETECTOR.detect(text)
    assert context is not None
    return context


@pytest.mark.parametrize(
    ("row", "word"),
    [
        ("notes/project-a.md", "project-a.md"),
        ("C:\\notes\\daily.md", "daily.md"),
        ("plain-tag", "plain-tag"),
        ("notes/", ""),
    ],
)
def test_suggestion_word_takes_last_segment(row: str, word: str) -> None:
    assert suggestion_word(row) == word


@pytest.mark.parametrize("text", ["See [[", "See [[P", "See [[Pr", "x #ab"])
def test_short_prefix_never_reaches_executor(text: str, executor: FakeExecutor) -> None:
    provider = SuggestionProvider(executor, store="/tmp/notes.db", min_chars=3)

    assert provider.fetch(detect(text)) == []
    assert executor.calls == []


def test_fetch_renders_query_and_maps_rows(executor: FakeExecutor) -> None:
    provider = SuggestionProvider(executor, store="/tmp/notes.db")

    suggestions = provider.fetch(detect("See [[Pro"))

    assert executor.calls == [
        ("/tmp/notes.db", "SELECT path FROM files WHERE path LIKE '%Pro%' LIMIT 10;")
    ]
    assert [s.word for s in suggestions] == ["project-a.md", "project-b.md", "Projector.md"]
    assert all(s.kind == DEFAULT_TRIGGERS["file"]["kind"] for s in suggestions)


def test_suggestions_carry_menu_flags(executor: FakeExecutor) -> None:
    suggestion = SuggestionProvider(executor, store="db").fetch(detect("See [[Pro"))[0]

    assert suggestion.allow_duplicates
    assert suggestion.allow_empty
    assert suggestion.case_insensitive
    assert suggestion.no_preselect


def test_escaped_prefix_is_used_in_query() -> None:
    executor = FakeExecutor(rows=["people/O'Brien.md"])
    provider = SuggestionProvider(executor, store="db")

    suggestions = provider.fetch(detect("met [[O'Brien"))

    assert executor.calls[0][1] == "SELECT path FROM files WHERE path LIKE '%O''Brien%' LIMIT 10;"
    assert [s.word for s in suggestions] == ["O'Brien.md"]


def test_threshold_counts_escaped_length() -> None:
    executor = FakeExecutor(rows=["a'b"])
    provider = SuggestionProvider(executor, store="db", min_chars=4)

    # "a'b" is three characters raw but four once escaped
    assert len(provider.fetch(detect("#a'b"))) == 1


def test_executor_error_degrades_to_empty() -> None:
    executor = FakeExecutor(error=RuntimeError("store locked"))
    provider = SuggestionProvider(executor, store="db")

    assert provider.fetch(detect("See [[Pro")) == []
    assert len(executor.calls) == 1


def test_order_is_preserved_and_blank_rows_skipped() -> None:
    executor = FakeExecutor(rows=["zeta", "", "alpha/", "mid/beta"])
    provider = SuggestionProvider(executor, store="db")

    assert [s.word for s in provider.fetch(detect("#tag"))] == ["zeta", "beta"]
