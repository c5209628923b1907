"""
Pydantic Transaction Models

TransactionRequest and its sub-objects are the payload of a create_transaction
transparent redirect. Each model carries an explicit wire_fields table; the
names in it are the processor's form field names and must not change.
"""
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

from .wire import WireField, scalar, flag, nested, mapping, listing


# ==================== Enumerations ====================

class TransactionSource(str, Enum):
    RECURRING_FIRST = "recurring_first"
    RECURRING = "recurring"
    MOTO = "moto"
    MERCHANT = "merchant"


class LineItemKind(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"


# ==================== Nested Request Types ====================

class CustomerRequest(BaseModel):
    """Customer created or referenced alongside the transaction."""
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    website: Optional[str] = None

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        scalar("id", "id"),
        scalar("first_name", "first_name"),
        scalar("last_name", "last_name"),
        scalar("company", "company"),
        scalar("email", "email"),
        scalar("phone", "phone"),
        scalar("fax", "fax"),
        scalar("website", "website"),
    )

    model_config = {"extra": "forbid"}


class Address(BaseModel):
    """Billing or shipping address."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    street_address: Optional[str] = None
    extended_address: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country_code_alpha2: Optional[str] = Field(default=None, min_length=2, max_length=2)
    country_name: Optional[str] = None

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        scalar("first_name", "first_name"),
        scalar("last_name", "last_name"),
        scalar("company", "company"),
        scalar("street_address", "street_address"),
        scalar("extended_address", "extended_address"),
        scalar("locality", "locality"),
        scalar("region", "region"),
        scalar("postal_code", "postal_code"),
        scalar("country_code_alpha2", "country_code_alpha2"),
        scalar("country_name", "country_name"),
    )

    model_config = {"extra": "forbid"}


class CreditCard(BaseModel):
    """
    Card fields the merchant may pre-fill.

    Card number and CVV normally come from the browser form, not from here.
    """
    token: Optional[str] = None
    cardholder_name: Optional[str] = None
    number: Optional[str] = None
    expiration_date: Optional[str] = None
    expiration_month: Optional[str] = None
    expiration_year: Optional[str] = None
    cvv: Optional[str] = None

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        scalar("token", "token"),
        scalar("cardholder_name", "cardholder_name"),
        scalar("number", "number"),
        scalar("expiration_date", "expiration_date"),
        scalar("expiration_month", "expiration_month"),
        scalar("expiration_year", "expiration_year"),
        scalar("cvv", "cvv"),
    )

    model_config = {"extra": "forbid"}


class Descriptor(BaseModel):
    """Dynamic descriptor shown on the cardholder statement."""
    name: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        scalar("name", "name"),
        scalar("phone", "phone"),
        scalar("url", "url"),
    )

    model_config = {"extra": "forbid"}


class RiskDataRequest(BaseModel):
    customer_browser: Optional[str] = None
    customer_ip: Optional[str] = None

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        scalar("customer_browser", "customer_browser"),
        scalar("customer_ip", "customer_ip"),
    )

    model_config = {"extra": "forbid"}


class TransactionOptionsPaypalRequest(BaseModel):
    """PayPal specific options; supplementary_data keys are merchant defined."""
    custom_field: Optional[str] = None
    payee_email: Optional[str] = None
    description: Optional[str] = None
    supplementary_data: Dict[str, str] = Field(default_factory=dict)

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        scalar("custom_field", "custom_field"),
        scalar("payee_email", "payee_email"),
        scalar("description", "description"),
        mapping("supplementary_data", "supplementary_data"),
    )

    model_config = {"extra": "forbid"}


class TransactionOptionsThreeDSecureRequest(BaseModel):
    required: bool = False

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        flag("required", "required"),
    )

    model_config = {"extra": "forbid"}


class TransactionOptions(BaseModel):
    """Processing options. All booleans are omitted from the form when false."""
    submit_for_settlement: bool = False
    store_in_vault: bool = False
    store_in_vault_on_success: bool = False
    add_billing_address_to_payment_method: bool = False
    store_shipping_address_in_vault: bool = False
    hold_in_escrow: bool = False
    paypal: Optional[TransactionOptionsPaypalRequest] = None
    skip_advanced_fraud_checking: bool = False
    three_d_secure: Optional[TransactionOptionsThreeDSecureRequest] = None

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        flag("submit_for_settlement", "submit_for_settlement"),
        flag("store_in_vault", "store_in_vault"),
        flag("store_in_vault_on_success", "store_in_vault_on_success"),
        flag("add_billing_address_to_payment_method", "add_billing_address_to_payment_method"),
        flag("store_shipping_address_in_vault", "store_shipping_address_in_vault"),
        flag("hold_in_escrow", "hold_in_escrow"),
        nested("paypal", "paypal"),
        flag("skip_advanced_fraud_checking", "skip_advanced_fraud_checking"),
        nested("three_d_secure", "three_d_secure"),
    )

    model_config = {"extra": "forbid"}


class TransactionLineItemRequest(BaseModel):
    """Level 3 line item."""
    name: str
    kind: LineItemKind
    quantity: Decimal = Field(gt=0)
    unit_amount: Decimal = Field(ge=0)
    total_amount: Decimal = Field(ge=0)
    unit_tax_amount: Optional[Decimal] = None
    discount_amount: Optional[Decimal] = None
    unit_of_measure: Optional[str] = None
    product_code: Optional[str] = None
    commodity_code: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        scalar("quantity", "quantity"),
        scalar("name", "name"),
        scalar("description", "description"),
        scalar("kind", "kind"),
        scalar("unit_amount", "unit_amount"),
        scalar("unit_tax_amount", "unit_tax_amount"),
        scalar("total_amount", "total_amount"),
        scalar("discount_amount", "discount_amount"),
        scalar("unit_of_measure", "unit_of_measure"),
        scalar("product_code", "product_code"),
        scalar("commodity_code", "commodity_code"),
        scalar("url", "url"),
    )

    model_config = {"extra": "forbid"}


# ==================== Transaction Request ====================

class TransactionRequest(BaseModel):
    """
    Parameters for creating a transaction.

    Sent as the "transaction" group of a create_transaction descriptor.
    Amounts are Decimals and keep their scale on the wire (20.00 stays 20.00).
    """
    customer_id: Optional[str] = None
    type: Optional[str] = None
    amount: Optional[Decimal] = Field(default=None, ge=0)
    order_id: Optional[str] = None
    payment_method_token: Optional[str] = None
    payment_method_nonce: Optional[str] = None
    merchant_account_id: Optional[str] = None
    plan_id: Optional[str] = None
    credit_card: Optional[CreditCard] = None
    customer: Optional[CustomerRequest] = None
    billing: Optional[Address] = None
    shipping: Optional[Address] = None
    tax_amount: Optional[Decimal] = Field(default=None, ge=0)
    tax_exempt: bool = False
    device_data: Optional[str] = None
    options: Optional[TransactionOptions] = None
    service_fee_amount: Optional[Decimal] = Field(default=None, ge=0)
    risk_data: Optional[RiskDataRequest] = None
    descriptor: Optional[Descriptor] = None
    channel: Optional[str] = None
    custom_fields: Dict[str, str] = Field(default_factory=dict)
    purchase_order_number: Optional[str] = None
    transaction_source: Optional[TransactionSource] = None
    line_items: List[TransactionLineItemRequest] = Field(default_factory=list)

    wire_root: ClassVar[str] = "transaction"
    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        scalar("customer_id", "customer_id"),
        scalar("type", "type"),
        scalar("amount", "amount"),
        scalar("order_id", "order_id"),
        scalar("payment_method_token", "payment_method_token"),
        scalar("payment_method_nonce", "payment_method_nonce"),
        scalar("merchant_account_id", "merchant_account_id"),
        scalar("plan_id", "plan_id"),
        nested("credit_card", "credit_card"),
        nested("customer", "customer"),
        nested("billing", "billing"),
        nested("shipping", "shipping"),
        scalar("tax_amount", "tax_amount"),
        flag("tax_exempt", "tax_exempt"),
        scalar("device_data", "device_data"),
        nested("options", "options"),
        scalar("service_fee_amount", "service_fee_amount"),
        nested("risk_data", "risk_data"),
        nested("descriptor", "descriptor"),
        scalar("channel", "channel"),
        mapping("custom_fields", "custom_fields"),
        scalar("purchase_order_number", "purchase_order_number"),
        scalar("transaction_source", "transaction_source"),
        listing("line_items", "line_items"),
    )

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "type": "sale",
                "amount": "20.00",
                "order_id": "1541415277280",
                "options": {
                    "submit_for_settlement": True,
                    "store_in_vault": True
                }
            }
        }
    }


class TransparentRedirectData(BaseModel):
    """Redirect target plus the transaction to create on the processor side."""
    redirect_url: str = Field(min_length=1)
    transaction: TransactionRequest




class CallbackResult(BaseModel):
    """
    Fields the processor appends to the merchant redirect URL.

    Result fields beyond these are kept as extras; hash is never included.
    """
    http_status: int
    kind: str
    id: Optional[str] = None

    model_config = {
        "extra": "allow",
        "json_schema_extra": {
            "example": {
                "http_status": 200,
                "kind": "create_transaction",
                "id": "7ygx2h"
            }
        }
    }
