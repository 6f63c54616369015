class ParseError(ValueError):
    """Raised when a reader fails to load or validate a news item file.

    ``item`` is the zero-based position of the offending news item, when
    the failure can be pinned to one.
    """
    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        item: int | None = None,
        cause: Exception | None = None,
    ):
        if item is not None:
            message = f"Item {item}: {message}"
        if path:
            message = f"{message} [file={path}]"
        super().__init__(message)
        self.path = path
        self.item = item
        self.cause = cause
