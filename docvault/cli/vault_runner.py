"""Command line entry point for the DocVault client.

Usage:
    python -m docvault.cli.vault_runner register --username jane --mobile 5551234567
    python -m docvault.cli.vault_runner login --mobile 5551234567
    python -m docvault.cli.vault_runner search --category Professional --sub-category HR --tag invoice
    python -m docvault.cli.vault_runner upload ./scan.pdf --date 2024-05-01 --category Personal --sub-category Tom
    python -m docvault.cli.vault_runner download <file_path> --out ./copy.pdf
    python -m docvault.cli.vault_runner logout
"""

import argparse
import asyncio
from datetime import date
from pathlib import Path

from docvault.clients.vault.VaultClientInterface import VaultClientInterface
from docvault.clients.vault.VaultClientManager import VaultClientManager
from docvault.helper.HelperConfig import HelperConfig
from docvault.logging.logging_setup import setup_logging
from docvault.models.errors import AuthError, VaultError
from docvault.models.inputs import normalize_mobile, normalize_otp
from docvault.models.search import SearchFilters
from docvault.models.session import SessionState
from docvault.models.upload import UploadCandidate, UploadFile
from docvault.presenter.ConsolePresenter import ConsolePresenter
from docvault.presenter.PresenterInterface import PresenterInterface
from docvault.services.RegistrationService import RegistrationService
from docvault.services.SearchService import SearchService
from docvault.services.SessionService import SessionService
from docvault.services.UploadService import UploadService
from docvault.storage.SessionStore import FileSessionStore


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docvault", description="DocVault document management client")
    commands = parser.add_subparsers(dest="command", required=True)

    register = commands.add_parser("register", help="register a mobile number")
    register.add_argument("--username", required=True)
    register.add_argument("--mobile", required=True)

    login = commands.add_parser("login", help="log in with a one-time password")
    login.add_argument("--mobile")

    commands.add_parser("logout", help="forget the stored session")

    search = commands.add_parser("search", help="search documents")
    search.add_argument("--category")
    search.add_argument("--sub-category")
    search.add_argument("--from", dest="from_date", type=date.fromisoformat, help="YYYY-MM-DD")
    search.add_argument("--to", dest="to_date", type=date.fromisoformat, help="YYYY-MM-DD")
    search.add_argument("--tag", action="append", default=[])

    upload = commands.add_parser("upload", help="upload a PDF, PNG or JPEG document")
    upload.add_argument("file", type=Path)
    upload.add_argument("--date", required=True, type=date.fromisoformat, help="YYYY-MM-DD")
    upload.add_argument("--category", required=True)
    upload.add_argument("--sub-category", required=True)
    upload.add_argument("--tag", action="append", default=[])
    upload.add_argument("--remarks", default="")

    download = commands.add_parser("download", help="download a document by its file path")
    download.add_argument("file_path")
    download.add_argument("--out", type=Path, required=True)
    return parser


async def _login(args: argparse.Namespace, sessions: SessionService, presenter: PresenterInterface) -> None:
    if sessions.state == SessionState.AUTHENTICATED:
        presenter.notify("Already logged in", f"Logged in as {sessions.session.user_id}")
        presenter.navigate("/dashboard")
        return

    mobile = normalize_mobile(args.mobile or input("Mobile number: "))
    while True:
        if sessions.state == SessionState.ANONYMOUS:
            await sessions.do_request_challenge(mobile)
            presenter.notify("OTP Sent", "Please check your mobile for the OTP")

        answer = input("OTP ('r' to resend, 'c' to change number): ").strip().lower()
        if answer == "r":
            await sessions.do_request_challenge(mobile)
            presenter.notify("OTP Sent", "Please check your mobile for the OTP")
            continue
        if answer == "c":
            sessions.reset()
            mobile = normalize_mobile(input("Mobile number: "))
            continue
        try:
            await sessions.do_submit_response(normalize_otp(answer))
        except VaultError as e:
            presenter.notify("Error", e.message, variant="destructive")
            continue
        presenter.notify("Login Successful", "Welcome to Document Management System")
        presenter.navigate("/dashboard")
        return


async def _search(args: argparse.Namespace, sessions: SessionService, searches: SearchService, presenter: PresenterInterface) -> None:
    filters = SearchFilters()
    filters.category.select_major_head(args.category)
    filters.category.select_minor_head(args.sub_category)
    filters.from_date = args.from_date
    filters.to_date = args.to_date
    for tag in args.tag:
        filters.tags.add(tag)

    outcome = await searches.do_search_filters(filters, sessions.session)
    if outcome.no_matches:
        presenter.notify("No results", "No documents found matching your criteria")
        return
    presenter.notify("Search completed", f"Found {len(outcome.documents)} document(s)")
    presenter.render_documents(outcome.documents)


async def _upload(args: argparse.Namespace, sessions: SessionService, uploads: UploadService, presenter: PresenterInterface) -> None:
    candidate = UploadCandidate()
    candidate.select_file(UploadFile.from_path(args.file))
    candidate.document_date = args.date
    candidate.category.select_major_head(args.category)
    candidate.category.select_minor_head(args.sub_category)
    for tag in args.tag:
        candidate.tags.add(tag)
    candidate.remarks = args.remarks

    await uploads.do_upload(candidate, sessions.session)
    candidate.reset()
    presenter.notify("Success", "Document uploaded successfully")


async def _download(args: argparse.Namespace, sessions: SessionService, vault_client: VaultClientInterface, presenter: PresenterInterface) -> None:
    if not sessions.session.is_authenticated:
        raise AuthError()
    content = await vault_client.do_download_document(args.file_path, token=sessions.session.token)
    args.out.write_bytes(content)
    presenter.notify("Download complete", f"Saved {len(content)} bytes to {args.out}")


async def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = setup_logging()
    config = HelperConfig(logger=logger)
    presenter = ConsolePresenter(logger)

    vault_client = VaultClientManager(helper_config=config).get_client()
    sessions = SessionService(
        helper_config=config,
        vault_client=vault_client,
        session_store=FileSessionStore(config.get_session_file(), logger),
    )

    try:
        await vault_client.boot()
        if args.command == "register":
            message = await RegistrationService(config, vault_client).do_register(args.username, normalize_mobile(args.mobile))
            presenter.notify("Registered", message or "Mobile number added. Now try sending OTP on Login.")
        elif args.command == "login":
            await _login(args, sessions, presenter)
        elif args.command == "logout":
            sessions.logout()
            presenter.navigate("/")
        elif args.command == "search":
            await _search(args, sessions, SearchService(config, vault_client), presenter)
        elif args.command == "upload":
            await _upload(args, sessions, UploadService(config, vault_client), presenter)
        elif args.command == "download":
            await _download(args, sessions, vault_client, presenter)
    except VaultError as e:
        presenter.notify("Error", e.message, variant="destructive")
        return 1
    except (EOFError, KeyboardInterrupt):
        # interactive prompts closed or interrupted
        presenter.notify("Cancelled", "No input received. Nothing was changed.", variant="destructive")
        return 1
    finally:
        await vault_client.close()
    return 0


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
