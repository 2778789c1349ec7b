from abc import ABC, abstractmethod

from docvault.models.document import DocumentRecord


class PresenterInterface(ABC):
    """
    The presentation layer as seen by the core: notifications, navigation and result lists.
    """

    @abstractmethod
    def notify(self, title: str, description: str, variant: str = "default") -> None:
        """
        Shows a notification to the user.

        Args:
            title (str): Short headline, e.g. "OTP Sent".
            description (str): Detail text.
            variant (str): "default" or "destructive".
        """
        pass

    @abstractmethod
    def navigate(self, route: str) -> None:
        """
        Switches to another screen, e.g. "/dashboard".
        """
        pass

    @abstractmethod
    def render_documents(self, documents: list[DocumentRecord]) -> None:
        pass
