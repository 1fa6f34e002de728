"""Custom exception hierarchy for Holded Bridge."""

from typing import Any


class HoldedBridgeError(Exception):
    """Base exception for all Holded Bridge errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# ----- Validation Errors -----


class ValidationError(HoldedBridgeError):
    """Input validation failed."""

    pass


# ----- Credential Errors -----


class CredentialNotFoundError(HoldedBridgeError):
    """No credential provider yielded a value."""

    def __init__(self, name: str, providers: list[str]) -> None:
        super().__init__(
            message=f"Credential '{name}' not found",
            details={"name": name, "providers": providers},
        )


# ----- External Service Errors -----


class ExternalServiceError(HoldedBridgeError):
    """Error from an external service."""

    pass


class HoldedAPIError(ExternalServiceError):
    """Holded call failed: transport error, HTTP error status or non-JSON body."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        self.body = body
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "status_code": status_code,
                # Holded error bodies can be large HTML pages
                "body": body[:500] if body else None,
            },
        )


class HostPlatformError(ExternalServiceError):
    """Error from the host platform (key-store)."""

    pass
