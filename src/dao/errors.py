from typing import Optional


class StoreError(RuntimeError):
    """Raised for any failure talking to the store.

    The underlying driver exception, when there is one, is kept on `cause`
    and chained as `__cause__`.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
