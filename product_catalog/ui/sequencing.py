"""
Request sequencing for view-models.

Every fetch takes a token from ``RequestSequencer.next()``; when the
response arrives it is applied only if ``is_current(token)`` still holds,
so a slow earlier response never overwrites a later one.
"""


class RequestSequencer:
    """Monotonically increasing request tokens."""

    def __init__(self):
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def next(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest
