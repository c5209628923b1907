"""
Braintree Transparent Redirect client.

Builds signed tr_data descriptors for merchant checkout forms and validates
the signed query strings the processor sends back.
"""
from .environment import Environment
from .exceptions import (
    BraintreeError,
    EncodingError,
    InvalidSignatureError,
    MalformedQueryError,
    MissingHashError,
)
from .gateway import Braintree
from .services import Signer, TransparentRedirectGateway

__version__ = "0.1.0"
__all__ = [
    "Braintree",
    "Environment",
    "Signer",
    "TransparentRedirectGateway",
    "BraintreeError",
    "EncodingError",
    "InvalidSignatureError",
    "MalformedQueryError",
    "MissingHashError",
]
