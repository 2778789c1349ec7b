import httpx
from pydantic import ValidationError as PydanticValidationError

from docvault.clients.vault.VaultClientInterface import VaultClientInterface
from docvault.clients.vault.models.Auth import ChallengeResponse, RegistrationResponse, TokenResponse
from docvault.helper.HelperConfig import HelperConfig
from docvault.models.config import EnvConfig
from docvault.models.document import DocumentRecord, SearchOutcome
from docvault.models.errors import RemoteError
from docvault.models.upload import UploadResult

DEFAULT_BASE_URL = "https://apis.allsoft.co/api/documentManagement"


class VaultClientAllsoft(VaultClientInterface):
    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)
        self._base_url = self.get_config_val("BASE_URL", default=DEFAULT_BASE_URL, val_type="string")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Allsoft"

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="BASE_URL", val_type="string", default=DEFAULT_BASE_URL),
        ]

    ################ AUTH ##################
    def _get_auth_header(self, token: str | None) -> dict:
        if token:
            return {"token": token}
        else:
            return {}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_register(self) -> str:
        return "/registerUser"

    def _get_endpoint_request_otp(self) -> str:
        return "/generateOTP"

    def _get_endpoint_validate_otp(self) -> str:
        return "/validateOTP"

    def _get_endpoint_search(self) -> str:
        return "/searchDocument"

    def _get_endpoint_upload(self) -> str:
        return "/saveDocumentEntry"

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    def _get_server_message(self, body: dict) -> str | None:
        # registration errors come back in "data", everything else in "message"
        for key in ("message", "data"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
        return None

    def _parse_register(self, response: httpx.Response, body: dict) -> RegistrationResponse:
        if not body.get("status"):
            raise RemoteError(self._get_server_message(body) or "Unable to register number.", status_code=response.status_code)
        data = body.get("data")
        return RegistrationResponse(
            engine=self._get_engine_name(),
            message=data if isinstance(data, str) else None,
        )

    def _parse_request_otp(self, response: httpx.Response, body: dict) -> ChallengeResponse:
        return ChallengeResponse(
            engine=self._get_engine_name(),
            message=self._get_server_message(body),
        )

    def _parse_validate_otp(self, response: httpx.Response, body: dict) -> TokenResponse:
        token = body.get("token")
        if not isinstance(token, str) or not token:
            raise RemoteError(self._get_server_message(body) or "Invalid OTP", status_code=response.status_code)
        user_id = body.get("user_id")
        return TokenResponse(
            engine=self._get_engine_name(),
            token=token,
            user_id=str(user_id) if user_id not in (None, "") else None,
        )

    def _parse_search(self, response: httpx.Response, body: dict) -> SearchOutcome:
        raw_documents = body.get("documents")
        if not isinstance(raw_documents, list) or not raw_documents:
            return SearchOutcome(documents=[], no_matches=True)
        try:
            documents = [DocumentRecord.model_validate(item) for item in raw_documents]
        except PydanticValidationError as e:
            self.logging.warning("Discarding malformed search response: %s", e)
            return SearchOutcome(documents=[], no_matches=True)
        return SearchOutcome(documents=documents, no_matches=False)

    def _parse_upload(self, response: httpx.Response, body: dict) -> UploadResult:
        return UploadResult(success=True, message=self._get_server_message(body))
