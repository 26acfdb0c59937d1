from typing import Optional


class SiteDataError(Exception):
    """Base exception for site data resolution failures.

    Attributes:
        message: Human-readable error description
        diagnostic: Technical diagnostic information for debugging
    """
    def __init__(self, message: str, diagnostic: Optional[str] = None):
        self.message = message
        self.diagnostic = diagnostic
        super().__init__(message)


class DecodingError(SiteDataError):
    """Raised when an environment value is not valid percent-encoded text.

    Attributes:
        variable: Name of the offending environment variable
        raw_value: The value as found in the environment
    """
    def __init__(
        self,
        variable: str,
        raw_value: str,
        diagnostic: Optional[str] = None
    ):
        self.variable = variable
        self.raw_value = raw_value
        message = f"Environment variable {variable} holds a malformed percent-encoded value"
        if diagnostic:
            message = f"{message}: {diagnostic}"
        super().__init__(message=message, diagnostic=diagnostic)


class EnvironmentFileError(SiteDataError):
    """Raised when a configured .env file is missing or cannot be read.

    Attributes:
        path: Path that was configured
    """
    def __init__(self, path: str, diagnostic: Optional[str] = None):
        self.path = path
        message = f"Cannot read environment file {path}"
        message = f"{message}: {diagnostic}" if diagnostic else f"{message}: not a file"
        super().__init__(message=message, diagnostic=diagnostic)
