"""Service registry rejection exception."""

from .....core.exceptions import ConflictError


class ServiceNotRecognizedError(ConflictError):
    """Raised when a service name is not known to the service registry.

    The request is well formed but cannot be admitted, so this is a
    conflict rather than a validation error.
    """

    def __init__(self, service: str):
        super().__init__(
            message=f"could not recognize service {service} on registry",
            error_code="SERVICE_NOT_RECOGNIZED",
            details={"service": service}
        )
        self.service = service
