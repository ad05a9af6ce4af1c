class DaoException(Exception):
    """Raised by the DAO layer when the store rejects an operation."""


class ApiError(Exception):
    """
    Error surfaced to the client as
    {"status": <status>, "errorMessage": <message>}.
    """

    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.message = message
        self.status = status
