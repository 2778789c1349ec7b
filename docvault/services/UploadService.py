"""Upload service: validates an upload candidate and submits it as multipart form data."""

from docvault.clients.vault.VaultClientInterface import VaultClientInterface
from docvault.helper.HelperConfig import HelperConfig
from docvault.helper.InFlightGuard import InFlightGuard
from docvault.models.errors import AuthError, ValidationError
from docvault.models.search import format_wire_date
from docvault.models.session import Session
from docvault.models.upload import UploadCandidate, UploadMetadata, UploadResult, check_mime_type


class UploadService:
    def __init__(self, helper_config: HelperConfig, vault_client: VaultClientInterface) -> None:
        self.logging = helper_config.get_logger()
        self._vault = vault_client
        self._guard = InFlightGuard()

    def is_busy(self) -> bool:
        return self._guard.is_running("upload")

    def validate(self, candidate: UploadCandidate) -> None:
        """
        Checks that the candidate may be submitted.

        Raises:
            ValidationError: If the file type is not allowed or a required field is missing.
        """
        if candidate.file is not None:
            check_mime_type(candidate.file.mime_type)

        missing = []
        if candidate.file is None:
            missing.append("file")
        if candidate.document_date is None:
            missing.append("date")
        if candidate.category.major_head is None:
            missing.append("category")
        if candidate.category.minor_head is None:
            missing.append("sub-category")
        if missing:
            raise ValidationError(f"Please fill in all required fields: {', '.join(missing)}")

    def build_metadata(self, candidate: UploadCandidate, user_id: str) -> UploadMetadata:
        """Builds the JSON block sent in the "data" part. The candidate must be valid."""
        self.validate(candidate)
        return UploadMetadata(
            major_head=candidate.category.major_head.value,
            minor_head=candidate.category.minor_head,
            document_date=format_wire_date(candidate.document_date),
            document_remarks=candidate.remarks,
            tags=candidate.tags.to_wire(),
            user_id=user_id,
        )

    async def do_upload(self, candidate: UploadCandidate, session: Session) -> UploadResult:
        """
        Uploads the candidate's file with its metadata.

        On success the caller may reset the candidate. On failure the candidate
        is left untouched so the user can retry.

        Raises:
            AuthError: If the session is not authenticated.
            ValidationError: If the candidate is incomplete.
            RemoteError: With the server's message if the upload is rejected.
            OperationInProgressError: If an upload is already in flight.
        """
        if not session.is_authenticated:
            raise AuthError()
        metadata = self.build_metadata(candidate, session.user_id)
        file = candidate.file

        with self._guard.hold("upload"):
            result = await self._vault.do_upload_document(file, metadata, token=session.token)

        self.logging.info(
            "Document %s uploaded under %s/%s", file.file_name, metadata.major_head, metadata.minor_head
        )
        return result
