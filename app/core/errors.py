class BrandServiceError(Exception):
    """Base class for failures that the action boundary turns into a result."""

    code = "error"
    default_message = "An unexpected error occurred. Please try again."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BrandServiceError):
    code = "validation"
    default_message = "Invalid input"


class NoBrandError(BrandServiceError):
    code = "no_brand"
    default_message = "No brand found. Please set up your brand first."


class NotFoundError(BrandServiceError):
    code = "not_found"
    default_message = "Rule not found."


class AlreadyExistsError(BrandServiceError):
    code = "already_exists"
    default_message = "A brand already exists for this account. You can only have one brand."


class StorageUnavailableError(BrandServiceError):
    code = "storage"
    default_message = "Storage is temporarily unavailable. Please try again."
