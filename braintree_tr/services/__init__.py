"""
Signing and transparent redirect codec services.
"""
from .signature_service import Signer
from .transparent_redirect import TransparentRedirectGateway, KIND_CREATE_TRANSACTION

__all__ = ["Signer", "TransparentRedirectGateway", "KIND_CREATE_TRANSACTION"]
