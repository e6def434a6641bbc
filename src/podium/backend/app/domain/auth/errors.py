class InvalidSessionError(Exception):
    """Raised when the identity provider rejects a session cookie."""
    pass


class SessionCreationError(Exception):
    pass


class MissingIdToken(Exception):
    def __init__(self):
        super().__init__("ID token is required")


class NotAuthenticated(Exception):
    def __init__(self):
        super().__init__("Unauthorized")


class FileAccessForbidden(Exception):
    def __init__(self):
        super().__init__("Unauthorized")
