"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ArticleValidationError(Exception):
    """Base class for rejected article input, reported to clients as code 400."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingRequiredFieldError(ArticleValidationError):
    """Raised when a create request lacks one or more mandatory fields."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


class EmptyUpdateError(ArticleValidationError):
    """Raised when an update request carries no field to change."""

    def __init__(self):
        super().__init__("No fields to update")


class InvalidParameterError(ArticleValidationError):
    """Raised when a request parameter has a value outside its allowed set."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for '{name}': {value!r}")


class DataStoreError(Exception):
    """Raised when the underlying data store fails.

    The original driver error is chained as ``__cause__``; it is logged but
    never shown to API clients.
    """
