# store/domain/exceptions.py


class DomainError(Exception):
    pass


class DomainValidationError(DomainError):
    """Raised when an entity or value object breaks one of its rules."""


class EntityNotFoundError(DomainError):
    pass
