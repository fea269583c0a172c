class FlatPadError(Exception):
    """Base error for the project."""

class InvalidPathError(FlatPadError):
    """A directory argument is missing or is not a directory."""

    def __init__(self, path, message: str):
        super().__init__(message)
        self.path = path
