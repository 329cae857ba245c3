from typing import Iterable

class TouristIDError(Exception):
    """Base class for errors raised by the Digital ID services"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TouristIDError):
    """One or more required fields were left blank"""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__("Please fill all required fields.")


class NotFoundError(TouristIDError):
    """Unknown or revoked Digital ID"""

    def __init__(self, tourist_id: str, message: str = "Invalid or revoked Digital ID."):
        self.tourist_id = tourist_id
        super().__init__(message)


class EncodingError(TouristIDError):
    """Uploaded photo could not be read"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__("Error processing image. Registration failed.")
