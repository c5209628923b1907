"""
Transparent Redirect Exception Hierarchy

Error codes use the braintree:tr: prefix so merchant callers can branch on them.
A wrong signature is not an exception on the validation path; it only becomes
InvalidSignatureError when a caller asks for the parsed callback parameters.
"""
from typing import Optional, Dict, Any


class BraintreeError(Exception):
    """
    Base exception for all transparent redirect errors.

    Every error carries a stable error code, a human readable message,
    and optional structured details for API responses.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API error response format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class MalformedQueryError(BraintreeError):
    """
    Callback query string is structurally invalid.

    Examples:
    - More than one hash parameter
    - Query cannot be split into content and signature
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "braintree:tr:malformed_query"
    ):
        super().__init__(error_code, message, details)


class MissingHashError(MalformedQueryError):
    """
    Callback query string has no hash parameter.

    Treated as tampering or an integration bug, never as a failed signature.
    """

    def __init__(self, message: str = "query is incorrect and has no hash parameter", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details, error_code="braintree:tr:missing_hash")


class InvalidSignatureError(BraintreeError):
    """
    Callback hash does not match the signed content.

    Examples:
    - Query parameters altered in the browser
    - Hash computed with a different private key
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("braintree:tr:invalid_signature", message, details)


class EncodingError(BraintreeError):
    """
    Payload could not be serialized into a request descriptor.

    Examples:
    - Field value of an unsupported type
    - Empty kind or redirect URL
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("braintree:tr:encoding_failed", message, details)
