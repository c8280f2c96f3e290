import pytest

from wikicomplete.config import default_config
from wikicomplete.domain.types import SessionState
from wikicomplete.presentation import CompletionApp
from wikicomplete.presentation.widgets import NoteEditor, SuggestionMenu

from conftest import FakeExecutor


def make_app(rows: list[str], text: str = "") -> tuple[CompletionApp, FakeExecutor]:
    executor = FakeExecutor(rows=rows)
    app = CompletionApp(default_config().with_overrides(db_path="/tmp/notes.db"), executor=executor, text=text)
    return app, executor


async def type_text(pilot, editor: NoteEditor, text: str) -> None:
    editor.insert(text, maintain_selection_offset=False)
    await pilot.pause()


@pytest.mark.asyncio
async def test_typing_a_link_opens_menu():
    app, executor = make_app(["notes/project-a.md", "notes/project-b.md"])

    async with app.run_test() as pilot:
        editor = app.query_one(NoteEditor)
        menu = app.query_one(SuggestionMenu)
        await type_text(pilot, editor, "See [[Pro")

        assert menu.is_open
        assert [s.word for s in menu.suggestions] == ["project-a.md", "project-b.md"]
        assert menu.highlighted is None
        assert app.session.state is SessionState.MENU_OPEN
        assert executor.calls


@pytest.mark.asyncio
async def test_enter_accepts_and_closes_link():
    app, _ = make_app(["notes/project-a.md", "notes/project-b.md"])

    async with app.run_test() as pilot:
        editor = app.query_one(NoteEditor)
        await type_text(pilot, editor, "See [[Pro")

        await pilot.press("down", "down", "enter")
        await pilot.pause()

        assert editor.text == "See [[project-b.md]]"
        assert editor.cursor_location == (0, len("See [[project-b.md]]"))
        assert not app.query_one(SuggestionMenu).is_open


@pytest.mark.asyncio
async def test_enter_without_selection_inserts_newline():
    app, _ = make_app(["notes/project-a.md"])

    async with app.run_test() as pilot:
        editor = app.query_one(NoteEditor)
        await type_text(pilot, editor, "See [[Pro")

        await pilot.press("enter")
        await pilot.pause()

        assert editor.text == "See [[Pro\n"
        assert not app.query_one(SuggestionMenu).is_open


@pytest.mark.asyncio
async def test_escape_closes_menu():
    app, _ = make_app(["projects"])

    async with app.run_test() as pilot:
        editor = app.query_one(NoteEditor)
        await type_text(pilot, editor, "todo #pro")

        await pilot.press("escape")
        await pilot.pause()

        assert not app.query_one(SuggestionMenu).is_open
        assert app.session.state is SessionState.IDLE


@pytest.mark.asyncio
async def test_no_rows_keeps_menu_hidden():
    app, executor = make_app([])

    async with app.run_test() as pilot:
        editor = app.query_one(NoteEditor)
        await type_text(pilot, editor, "See [[Pro")

        assert len(executor.calls) == 1
        assert not app.query_one(SuggestionMenu).is_open
