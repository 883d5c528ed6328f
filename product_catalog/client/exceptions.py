"""
Client-side error raised for failed catalog API calls.
"""

from typing import Optional


class CatalogAPIError(Exception):
    """
    Raised when the catalog API answers with a non-2xx status or cannot
    be reached at all (``status_code`` is None in that case).
    """

    def __init__(self, status_code: Optional[int], message: str, code: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def __repr__(self) -> str:
        return f"CatalogAPIError(status_code={self.status_code}, message={self.message!r})"
