class CirculationError(Exception):
    """Base class for failures raised while computing token circulation."""


class InvalidArgument(CirculationError, ValueError):
    pass


class TokenNotFound(CirculationError):
    def __init__(self, token: str, status_code: int):
        super().__init__(f"HTS Token {token} was not found, code: {status_code}")
        self.token = token
        self.status_code = status_code


class AccountNotFound(CirculationError):
    def __init__(self, account: str, status_code: int):
        super().__init__(f"Balance for {account} was not found, code: {status_code}")
        self.account = account
        self.status_code = status_code


class TransportError(CirculationError):
    """The mirror node could not be reached or the connection failed mid-request."""
