"""
Payload models for transparent redirect descriptors.
"""
from .wire import WireField, WireKind
from .transactions import (
    Address,
    CallbackResult,
    CreditCard,
    CustomerRequest,
    Descriptor,
    LineItemKind,
    RiskDataRequest,
    TransactionLineItemRequest,
    TransactionOptions,
    TransactionOptionsPaypalRequest,
    TransactionOptionsThreeDSecureRequest,
    TransactionRequest,
    TransactionSource,
    TransparentRedirectData,
)

__all__ = [
    "WireField",
    "WireKind",
    "Address",
    "CallbackResult",
    "CreditCard",
    "CustomerRequest",
    "Descriptor",
    "LineItemKind",
    "RiskDataRequest",
    "TransactionLineItemRequest",
    "TransactionOptions",
    "TransactionOptionsPaypalRequest",
    "TransactionOptionsThreeDSecureRequest",
    "TransactionRequest",
    "TransactionSource",
    "TransparentRedirectData",
]
