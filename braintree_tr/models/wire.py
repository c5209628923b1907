"""
Wire Name Table Types

Every payload model declares its form fields explicitly as a tuple of
WireField entries. The form encoder walks these tables instead of
inspecting model attributes, so the external field names stay visible.
"""
from enum import Enum
from typing import NamedTuple


class WireKind(str, Enum):
    """How a field is flattened into form pairs."""
    SCALAR = "scalar"    # string, Decimal, int or str enum; omitted when empty
    FLAG = "flag"        # bool encoded as 1, omitted when false
    OBJECT = "object"    # nested model, bracketed under its wire name
    MAP = "map"          # Dict[str, str], one pair per key
    LIST = "list"        # list of nested models, bracketed by index


class WireField(NamedTuple):
    attr: str
    wire_name: str
    kind: WireKind = WireKind.SCALAR


def scalar(attr: str, wire_name: str) -> WireField:
    return WireField(attr, wire_name, WireKind.SCALAR)


def flag(attr: str, wire_name: str) -> WireField:
    return WireField(attr, wire_name, WireKind.FLAG)


def nested(attr: str, wire_name: str) -> WireField:
    return WireField(attr, wire_name, WireKind.OBJECT)


def mapping(attr: str, wire_name: str) -> WireField:
    return WireField(attr, wire_name, WireKind.MAP)


def listing(attr: str, wire_name: str) -> WireField:
    return WireField(attr, wire_name, WireKind.LIST)
