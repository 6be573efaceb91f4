"""Errors raised below the service layer."""


class DomainError(ValueError):
    """A business rule rejected the requested change."""


class DuplicateEmailError(DomainError):
    def __init__(self) -> None:
        super().__init__("User with this email already exists")


class InsufficientStockError(DomainError):
    def __init__(self) -> None:
        super().__init__("Insufficient stock")


class RepositoryError(RuntimeError):
    """Unexpected failure inside a repository operation."""
