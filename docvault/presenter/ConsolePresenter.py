from docvault.logging.logging_setup import ColorLogger
from docvault.models.document import DocumentRecord
from docvault.presenter.PresenterInterface import PresenterInterface


class ConsolePresenter(PresenterInterface):
    """Presents notifications and search results through the coloured console logger."""

    def __init__(self, logger: ColorLogger) -> None:
        self.logging = logger
        self.current_route = "/"

    def notify(self, title: str, description: str, variant: str = "default") -> None:
        if variant == "destructive":
            self.logging.error("%s: %s", title, description)
        else:
            self.logging.info("%s: %s", title, description, color="green")

    def navigate(self, route: str) -> None:
        self.current_route = route
        self.logging.debug("Navigated to %s", route)

    def render_documents(self, documents: list[DocumentRecord]) -> None:
        for doc in documents:
            self.logging.info(
                "[%s] %s | %s/%s | %s", doc.document_id, doc.document_name or "-",
                doc.major_head or "-", doc.minor_head or "-", doc.document_date or "-",
                color="cyan",
            )
            if doc.tags:
                self.logging.info("    tags: %s", ", ".join(doc.tags))
            if doc.document_remarks:
                self.logging.info("    remarks: %s", doc.document_remarks)
            self.logging.info("    %s: %s", "preview (pdf)" if doc.is_pdf() else "preview (image)", doc.file_path)
