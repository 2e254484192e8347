"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AdvisoryServiceError(DomainException):
    """Advisory text service returned an error, timed out or sent malformed content"""

    pass
