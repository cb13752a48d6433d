# notion/errors.py
from typing import Optional


class MissingAPIKey(ValueError):
    pass


class MissingDatabaseID(ValueError):
    pass


class ConversionError(RuntimeError):
    """HTML could not be turned into blocks."""


class ExportError(RuntimeError):
    """
    The block store rejected a request.

    When the page was already created, page_id / page_url identify it and
    appended_batches says how many append batches landed, so the caller
    can resume with just the remainder.
    """

    def __init__(self, message: str, *, page_id: Optional[str] = None,
                 page_url: Optional[str] = None, appended_batches: int = 0):
        super().__init__(message)
        self.page_id = page_id
        self.page_url = page_url
        self.appended_batches = appended_batches

    @property
    def page_created(self) -> bool:
        return self.page_id is not None
