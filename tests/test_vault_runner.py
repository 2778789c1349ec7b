import argparse
import logging
from unittest.mock import MagicMock

import pytest

from docvault.cli import vault_runner
from docvault.models.document import DocumentRecord
from docvault.logging.logging_setup import ColorLogger
from docvault.models.session import Session, SessionState
from docvault.presenter.ConsolePresenter import ConsolePresenter
from docvault.presenter.PresenterInterface import PresenterInterface
from docvault.services.SearchService import SearchService
from docvault.services.SessionService import SessionService
from docvault.storage.SessionStore import MemorySessionStore


class RecordingPresenter(PresenterInterface):
    def __init__(self) -> None:
        self.notifications: list[tuple[str, str, str]] = []
        self.routes: list[str] = []
        self.rendered: list[DocumentRecord] = []

    def notify(self, title, description, variant="default"):
        self.notifications.append((title, description, variant))

    def navigate(self, route):
        self.routes.append(route)

    def render_documents(self, documents):
        self.rendered.extend(documents)


def test_parser_reads_search_filters():
    args = vault_runner._build_parser().parse_args(
        ["search", "--category", "Personal", "--from", "2024-01-31", "--tag", "a", "--tag", "b"]
    )
    assert args.category == "Personal"
    assert args.from_date.day == 31
    assert args.tag == ["a", "b"]


@pytest.mark.asyncio
async def test_login_flow_with_one_wrong_otp(make_client, helper_config, server, monkeypatch):
    server.reply("/generateOTP", 200, {})
    server.reply("/validateOTP", 401, {"message": "Invalid OTP"})
    client = await make_client(server)
    sessions = SessionService(helper_config, client, MemorySessionStore())
    presenter = RecordingPresenter()

    answers = iter(["111111", "222222"])

    def fake_input(prompt):
        answer = next(answers)
        if answer == "222222":
            server.reply("/validateOTP", 200, {"token": "abc", "user_id": "u1"})
        return answer

    monkeypatch.setattr("builtins.input", fake_input)

    await vault_runner._login(argparse.Namespace(mobile="555-123-4567"), sessions, presenter)

    assert sessions.state == SessionState.AUTHENTICATED
    assert server.last_json("/generateOTP") == {"mobile_number": "5551234567"}
    assert ("Error", "Invalid OTP", "destructive") in presenter.notifications
    assert presenter.routes == ["/dashboard"]


@pytest.mark.asyncio
async def test_search_command_renders_results(make_client, helper_config, server):
    server.reply("/searchDocument", 200, {"documents": [{"document_id": "1", "file_path": "https://f.test/a.png"}]})
    client = await make_client(server)
    sessions = SessionService(helper_config, client, MemorySessionStore(Session(token="abc", user_id="u1")))
    presenter = RecordingPresenter()
    args = argparse.Namespace(category="Professional", sub_category="IT", from_date=None, to_date=None, tag=["x"])

    await vault_runner._search(args, sessions, SearchService(helper_config, client), presenter)

    assert [d.document_id for d in presenter.rendered] == ["1"]
    assert presenter.notifications[-1][0] == "Search completed"
    assert server.last_json("/searchDocument") == {
        "major_head": "Professional",
        "minor_head": "IT",
        "tags": [{"tag_name": "x"}],
        "user_id": "u1",
    }


def test_console_presenter_routes_by_variant():
    logger = MagicMock()
    presenter = ConsolePresenter(logger)

    presenter.notify("Error", "boom", variant="destructive")
    presenter.notify("OTP Sent", "check your phone")
    presenter.navigate("/search")

    logger.error.assert_called_once()
    assert logger.info.call_args.kwargs["color"] == "green"
    assert presenter.current_route == "/search"


@pytest.mark.asyncio
@pytest.mark.parametrize("interruption", [EOFError, KeyboardInterrupt])
async def test_closed_input_during_login_exits_cleanly(helper_config, monkeypatch, tmp_path, interruption):
    monkeypatch.setenv("ROOT_DIR", str(tmp_path))
    monkeypatch.setattr(vault_runner, "setup_logging", lambda: ColorLogger(logging.getLogger("docvault.tests")))
    notifications = []
    monkeypatch.setattr(ConsolePresenter, "notify", lambda self, *a, **kw: notifications.append(a))

    def closed_input(prompt):
        raise interruption()

    monkeypatch.setattr("builtins.input", closed_input)

    assert await vault_runner.main(["login"]) == 1
    assert notifications[-1][0] == "Cancelled"
    assert not (tmp_path / ".docvault" / "session.json").exists()
