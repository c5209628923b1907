"""
Form Encoder for Transparent Redirect Payloads

Flattens payload models into ordered (key, value) pairs using each model's
wire_fields table, and serializes pairs as a percent-encoded query string.

Flattening Rules:
- Nested objects become bracketed groups: transaction[options][store_in_vault]
- Map entries use their own key: transaction[custom_fields][gift_wrap]
- List items are indexed: transaction[line_items][0][name]
- Flags encode as 1 and are omitted when false
- None, empty strings, empty maps and empty lists are omitted
- A nested object with nothing to emit contributes no keys at all
"""
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Tuple
from urllib.parse import quote

from ..exceptions import EncodingError
from ..models.wire import WireKind

Pair = Tuple[str, str]


def format_scalar(value: Any, key: str) -> Optional[str]:
    """
    Render a scalar field value as its wire text.

    Returns:
        Wire text, or None if the field should be omitted

    Raises:
        EncodingError: For booleans outside flag fields, floats, non-finite
            decimals and any other unsupported type
    """
    if value is None:
        return None
    # bool is checked before int: booleans must be declared as flags
    if isinstance(value, bool):
        raise EncodingError(
            f"Boolean value for {key} must be declared as a flag field",
            details={"key": key}
        )
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value or None
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise EncodingError(f"Non-finite amount for {key}", details={"key": key})
        return format(value, "f")
    if isinstance(value, int):
        return str(value)

    raise EncodingError(
        f"Unsupported value type {type(value).__name__} for {key}",
        details={"key": key, "type": type(value).__name__}
    )


def has_wire_values(model: Any) -> bool:
    """True if flattening the model would emit at least one pair."""
    for field in model.wire_fields:
        value = getattr(model, field.attr, None)
        if field.kind is WireKind.FLAG:
            if value is True:
                return True
        elif field.kind is WireKind.OBJECT:
            if value is not None and has_wire_values(value):
                return True
        elif field.kind is WireKind.MAP:
            if value and any(v not in (None, "") for v in value.values()):
                return True
        elif field.kind is WireKind.LIST:
            if value and any(has_wire_values(item) for item in value):
                return True
        elif value is not None and value != "":
            return True
    return False


def flatten(model: Any, prefix: str) -> List[Pair]:
    """
    Flatten a payload model into ordered form pairs under prefix.

    Args:
        model: Model instance declaring a wire_fields table
        prefix: Key of the enclosing group, e.g. "transaction"

    Returns:
        Pairs in wire_fields declaration order

    Raises:
        EncodingError: If any field cannot be encoded
    """
    wire_fields = getattr(model, "wire_fields", None)
    if wire_fields is None:
        raise EncodingError(
            f"{type(model).__name__} has no wire field table",
            details={"key": prefix}
        )

    pairs: List[Pair] = []

    for field in wire_fields:
        value = getattr(model, field.attr, None)
        key = f"{prefix}[{field.wire_name}]"

        if field.kind is WireKind.FLAG:
            if value is None or value is False:
                continue
            if value is not True:
                raise EncodingError(f"Flag {key} must be a boolean", details={"key": key})
            pairs.append((key, "1"))

        elif field.kind is WireKind.OBJECT:
            if value is None or not has_wire_values(value):
                continue
            pairs.extend(flatten(value, key))

        elif field.kind is WireKind.MAP:
            for map_key, map_value in (value or {}).items():
                entry_key = f"{key}[{map_key}]"
                text = format_scalar(map_value, entry_key)
                if text is not None:
                    pairs.append((entry_key, text))

        elif field.kind is WireKind.LIST:
            for index, item in enumerate(value or []):
                pairs.extend(flatten(item, f"{key}[{index}]"))

        else:
            text = format_scalar(value, key)
            if text is not None:
                pairs.append((key, text))

    return pairs


def encode_pairs(pairs: List[Pair]) -> str:
    """
    Join pairs into a query string.

    Keys and values are fully percent-encoded; spaces become %20, never +.
    """
    return "&".join(
        f"{quote(key, safe='')}={quote(value, safe='')}"
        for key, value in pairs
    )
