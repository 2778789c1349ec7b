"""Search service: turns search filters into an API query and runs it.

Unset filters are omitted from the query entirely; the API distinguishes
"not specified" from "specified as empty".
"""

from docvault.clients.vault.VaultClientInterface import VaultClientInterface
from docvault.helper.HelperConfig import HelperConfig
from docvault.helper.InFlightGuard import InFlightGuard
from docvault.models.document import SearchOutcome
from docvault.models.errors import AuthError, ValidationError
from docvault.models.search import SearchFilters, SearchQuery, format_wire_date
from docvault.models.session import Session


class SearchService:
    """Builds and executes document searches for the session's user."""

    def __init__(self, helper_config: HelperConfig, vault_client: VaultClientInterface) -> None:
        self.logging = helper_config.get_logger()
        self._vault = vault_client
        self._guard = InFlightGuard()

    def is_busy(self) -> bool:
        return self._guard.is_running("search")

    ##########################################
    ################ CORE ####################
    ##########################################

    def build_query(self, filters: SearchFilters, user_id: str) -> SearchQuery:
        """
        Builds the wire query from the current filters.

        Args:
            filters (SearchFilters): The search form state.
            user_id (str): The acting user.

        Returns:
            SearchQuery: Query with every unset filter left out.

        Raises:
            ValidationError: If both dates are set and from_date is after to_date.
        """
        if filters.from_date and filters.to_date and filters.from_date > filters.to_date:
            raise ValidationError("The 'from' date must not be after the 'to' date.")

        major_head = filters.category.major_head
        return SearchQuery(
            major_head=major_head.value if major_head else None,
            minor_head=filters.category.minor_head,
            from_date=format_wire_date(filters.from_date) if filters.from_date else None,
            to_date=format_wire_date(filters.to_date) if filters.to_date else None,
            tags=filters.tags.to_wire() if len(filters.tags) else None,
            user_id=user_id,
        )

    async def do_search(self, query: SearchQuery, session: Session) -> SearchOutcome:
        """
        Runs a search with the session token attached.

        Returns:
            SearchOutcome: The matching documents; no_matches is set when the
                server answered successfully without usable documents.

        Raises:
            AuthError: If the session is not authenticated.
            RemoteError: If the server answers with a non-2xx status or cannot be reached.
            OperationInProgressError: If a search is already in flight.
        """
        if not session.is_authenticated:
            raise AuthError()

        with self._guard.hold("search"):
            outcome = await self._vault.do_search_documents(query, token=session.token)

        if outcome.no_matches:
            self.logging.info("Search completed: no documents found matching the criteria")
        else:
            self.logging.info("Search completed: found %d document(s)", len(outcome.documents))
        return outcome

    async def do_search_filters(self, filters: SearchFilters, session: Session) -> SearchOutcome:
        """Convenience wrapper: build the query for the session's user and run it."""
        if not session.is_authenticated:
            raise AuthError()
        return await self.do_search(self.build_query(filters, session.user_id), session)
