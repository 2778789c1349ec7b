from abc import abstractmethod

import httpx

from docvault.clients.ClientInterface import ClientInterface
from docvault.clients.vault.models.Auth import ChallengeResponse, RegistrationResponse, TokenResponse
from docvault.helper.HelperConfig import HelperConfig
from docvault.models.document import SearchOutcome
from docvault.models.errors import RemoteError
from docvault.models.search import SearchQuery
from docvault.models.upload import UploadFile, UploadMetadata, UploadResult


class VaultClientInterface(ClientInterface):
    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "vault"

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_register(self) -> str:
        """
        Returns the endpoint path for user registration (e.g. "/registerUser")
        """
        pass

    @abstractmethod
    def _get_endpoint_request_otp(self) -> str:
        """
        Returns the endpoint path that sends an OTP to a mobile number (e.g. "/generateOTP")
        """
        pass

    @abstractmethod
    def _get_endpoint_validate_otp(self) -> str:
        """
        Returns the endpoint path that exchanges an OTP for a session token (e.g. "/validateOTP")
        """
        pass

    @abstractmethod
    def _get_endpoint_search(self) -> str:
        """
        Returns the endpoint path for document searches (e.g. "/searchDocument")
        """
        pass

    @abstractmethod
    def _get_endpoint_upload(self) -> str:
        """
        Returns the endpoint path for document uploads (e.g. "/saveDocumentEntry")
        """
        pass

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    @abstractmethod
    def _parse_register(self, response: httpx.Response, body: dict) -> RegistrationResponse:
        """
        Decodes a 2xx registration response.

        Raises:
            RemoteError: If the body does not confirm the registration.
        """
        pass

    @abstractmethod
    def _parse_request_otp(self, response: httpx.Response, body: dict) -> ChallengeResponse:
        pass

    @abstractmethod
    def _parse_validate_otp(self, response: httpx.Response, body: dict) -> TokenResponse:
        """
        Decodes a 2xx OTP validation response.

        Raises:
            RemoteError: If the body carries no token.
        """
        pass

    @abstractmethod
    def _parse_search(self, response: httpx.Response, body: dict) -> SearchOutcome:
        """
        Decodes a 2xx search response. Empty or malformed bodies yield a no-match outcome.
        """
        pass

    @abstractmethod
    def _parse_upload(self, response: httpx.Response, body: dict) -> UploadResult:
        pass

    @abstractmethod
    def _get_server_message(self, body: dict) -> str | None:
        """
        Extracts the server-supplied message from a decoded body, if any.
        """
        pass

    def _read_json(self, response: httpx.Response) -> dict:
        """
        Returns the response body as a dict, or an empty dict if it is not a JSON object.
        """
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def _do_api_call(self, fallback_message: str, **request_kwargs) -> tuple[httpx.Response, dict]:
        """
        Performs a request and maps every failure onto a RemoteError.

        Args:
            fallback_message (str): Message used when the server does not supply one.
            **request_kwargs: Passed through to do_request().

        Returns:
            tuple[httpx.Response, dict]: The 2xx response and its decoded body.

        Raises:
            RemoteError: On transport failures and non-2xx responses.
        """
        try:
            response = await self.do_request(**request_kwargs)
        except httpx.HTTPError as e:
            self.logging.error("Request to %s failed: %s", self.get_engine_name(), e)
            raise RemoteError(fallback_message) from e

        body = self._read_json(response)
        if not response.is_success:
            message = self._get_server_message(body) or fallback_message
            self.logging.warning(
                "%s responded with status %d: %s", self.get_engine_name(), response.status_code, message
            )
            raise RemoteError(message, status_code=response.status_code)
        return response, body

    async def do_register(self, username: str, mobile_number: str) -> RegistrationResponse:
        response, body = await self._do_api_call(
            "Unable to register number.",
            method="POST",
            endpoint=self._get_endpoint_register(),
            json={"username": username, "mobile_number": mobile_number},
        )
        return self._parse_register(response, body)

    async def do_request_otp(self, mobile_number: str) -> ChallengeResponse:
        response, body = await self._do_api_call(
            "Failed to send OTP",
            method="POST",
            endpoint=self._get_endpoint_request_otp(),
            json={"mobile_number": mobile_number},
        )
        return self._parse_request_otp(response, body)

    async def do_validate_otp(self, mobile_number: str, otp: str) -> TokenResponse:
        response, body = await self._do_api_call(
            "Invalid OTP",
            method="POST",
            endpoint=self._get_endpoint_validate_otp(),
            json={"mobile_number": mobile_number, "otp": otp},
        )
        return self._parse_validate_otp(response, body)

    async def do_search_documents(self, query: SearchQuery, token: str) -> SearchOutcome:
        response, body = await self._do_api_call(
            "Failed to search documents. Please try again.",
            method="POST",
            endpoint=self._get_endpoint_search(),
            json=query.to_payload(),
            token=token,
        )
        return self._parse_search(response, body)

    async def do_upload_document(self, file: UploadFile, metadata: UploadMetadata, token: str) -> UploadResult:
        response, body = await self._do_api_call(
            "Failed to upload document",
            method="POST",
            endpoint=self._get_endpoint_upload(),
            files={"file": (file.file_name, file.content, file.mime_type)},
            data={"data": metadata.model_dump_json()},
            token=token,
        )
        return self._parse_upload(response, body)

    async def do_download_document(self, file_path: str, token: str) -> bytes:
        """
        Fetches the stored file behind a document record's file_path.

        Absolute URLs are used as they are; relative paths are resolved against the base URL.
        """
        if file_path.startswith(("http://", "https://")):
            target = {"url": file_path}
        else:
            target = {"endpoint": file_path}
        response, _ = await self._do_api_call(
            "Failed to download document",
            method="GET",
            token=token,
            **target,
        )
        return response.content
