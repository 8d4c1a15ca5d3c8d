from typing import Optional


class ProvisioningError(Exception):
    """Base error for a provisioning run. ``step`` names the stage that failed."""

    def __init__(self, message: str, step: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.step = step

    def __str__(self) -> str:
        if self.step:
            return f"[{self.step}] {self.message}"
        return self.message


class ConfigurationError(ProvisioningError):
    pass


class ImageNotFoundError(ProvisioningError):
    pass


class AuthorizationError(ProvisioningError):
    pass


class TransportError(ProvisioningError):
    pass


class RequestRejectedError(ProvisioningError):
    pass
