"""Domain errors."""


class BookingValidationError(ValueError):
    """Raised when a booking or trip lookup request is incomplete or inconsistent."""
