import httpx
import pytest

from docvault.clients.vault.VaultClientManager import VaultClientManager
from docvault.clients.vault.allsoft.VaultClientAllsoft import VaultClientAllsoft
from docvault.models.errors import RemoteError, ValidationError
from docvault.services.RegistrationService import RegistrationService


def test_manager_resolves_default_engine(helper_config):
    client = VaultClientManager(helper_config).get_client()
    assert isinstance(client, VaultClientAllsoft)
    assert client.get_engine_name() == "allsoft"
    assert client.timeout is None


def test_manager_rejects_unknown_engine(helper_config, monkeypatch):
    monkeypatch.setenv("VAULT_ENGINE", "dropbox")
    with pytest.raises(ValueError):
        VaultClientManager(helper_config)


def test_timeout_is_read_from_config(helper_config, monkeypatch):
    monkeypatch.setenv("VAULT_TIMEOUT", "12.5")
    assert VaultClientAllsoft(helper_config).timeout == 12.5


@pytest.mark.asyncio
async def test_request_before_boot_fails(helper_config):
    client = VaultClientAllsoft(helper_config)
    with pytest.raises(RuntimeError):
        await client.do_request(endpoint="/generateOTP")


@pytest.mark.asyncio
async def test_unauthenticated_calls_send_no_token_header(make_client, server):
    server.reply("/generateOTP", 200, {})
    client = await make_client(server)

    await client.do_request_otp("5551234567")

    request = server.requests[0]
    assert "token" not in request.headers
    assert str(request.url) == "https://vault.test/api/documentManagement/generateOTP"


@pytest.mark.asyncio
async def test_download_resolves_relative_paths(make_client, server):
    server.reply("/files/a.pdf", 200, b"%PDF-bytes")
    client = await make_client(server)

    content = await client.do_download_document("files/a.pdf", token="abc")

    assert content == b"%PDF-bytes"
    assert str(server.requests[0].url) == "https://vault.test/api/documentManagement/files/a.pdf"
    assert server.requests[0].headers["token"] == "abc"


@pytest.mark.asyncio
async def test_download_failure_is_a_remote_error(make_client, server):
    client = await make_client(server)
    with pytest.raises(RemoteError) as excinfo:
        await client.do_download_document("https://cdn.test/missing.pdf", token="abc")
    assert excinfo.value.status_code == 404


@pytest.mark.asyncio
async def test_register_success(make_client, helper_config, server):
    server.reply("/registerUser", 200, {"status": True, "data": "Registered"})
    registrations = RegistrationService(helper_config, await make_client(server))

    message = await registrations.do_register(" jane ", "5551234567")

    assert message == "Registered"
    assert server.last_json("/registerUser") == {"username": "jane", "mobile_number": "5551234567"}


@pytest.mark.asyncio
async def test_register_refused_with_status_false(make_client, helper_config, server):
    server.reply("/registerUser", 200, {"status": False, "data": "Number already registered"})
    registrations = RegistrationService(helper_config, await make_client(server))

    with pytest.raises(RemoteError) as excinfo:
        await registrations.do_register("jane", "5551234567")

    assert excinfo.value.message == "Number already registered"


@pytest.mark.asyncio
async def test_register_transport_failure_uses_fallback(make_client, helper_config):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    registrations = RegistrationService(helper_config, await make_client(handler))

    with pytest.raises(RemoteError) as excinfo:
        await registrations.do_register("jane", "5551234567")

    assert excinfo.value.message == "Unable to register number."


@pytest.mark.asyncio
@pytest.mark.parametrize("username, mobile", [("", "5551234567"), ("jane", "12345")])
async def test_register_validates_locally(make_client, helper_config, server, username, mobile):
    registrations = RegistrationService(helper_config, await make_client(server))

    with pytest.raises(ValidationError):
        await registrations.do_register(username, mobile)
    assert server.requests == []
