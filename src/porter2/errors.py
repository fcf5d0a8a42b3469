"""Errors raised by the Porter2 stemmer."""


class InvalidInputError(ValueError):
    """Stemmer input is not a non-empty string"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
