class ClusterError(ValueError):
    """Raised when the clusterer is handed an argument it cannot work with."""
    def __init__(self, message: str, *, argument: str | None = None):
        if argument:
            message = f"{message} [argument={argument}]"
        super().__init__(message)
        self.argument = argument
