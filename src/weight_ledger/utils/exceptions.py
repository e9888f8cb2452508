"""Custom exceptions for the weight ledger."""


class WeightLedgerError(Exception):
    """Base exception for all weight ledger errors."""

    pass


class ConfigurationError(WeightLedgerError):
    """Raised when there is a configuration error."""

    pass


class StorageError(WeightLedgerError):
    """Raised when the key-value store cannot be opened."""

    pass


class ValidationError(WeightLedgerError):
    """Raised when record input fails validation."""

    pass


class MissingFieldError(ValidationError):
    """Raised when a required input field is empty or absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidWeightError(ValidationError):
    """Raised when the weight is not a number or is not positive."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid weight: {value!r} (must be a positive number)")


class InvalidUnitError(ValidationError):
    """Raised when a new record is given a unit outside the supported set."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Unsupported unit: {unit!r}")


class DuplicateRecordError(WeightLedgerError):
    """Raised when inserting a record whose id is already in the ledger."""

    pass
