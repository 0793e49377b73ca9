"""
Integra EAS schema definitions.

These schemas must be registered on the EAS SchemaRegistry before use. Registration
itself happens elsewhere; this module only describes what gets registered.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from . import constants as const
from .errors import InvalidSchemaError
from .hashing import compute_schema_uid
from .validation import validate_address

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_BASE_TYPE_RE = re.compile(
    r"^(address|bool|string|bytes|bytes([1-9]|[12][0-9]|3[0-2])|u?int(8|16|24|32|40|48|56|64|72|80|88|96|104|112|120|128|136|144|152|160|168|176|184|192|200|208|216|224|232|240|248|256)?)$"
)
_ARRAY_SUFFIX_RE = re.compile(r"(\[\d*\])+$")


@dataclass(frozen=True, slots=True)
class SchemaField:
    type: str
    name: str

    @property
    def is_array(self) -> bool:
        return self.type.endswith("]")

    @property
    def base_type(self) -> str:
        return _ARRAY_SUFFIX_RE.sub("", self.type)


def parse_schema_fields(schema: str) -> tuple[SchemaField, ...]:
    """
    Split an EAS schema string ("<type> <name>, ...") into its fields, in order.

    Raises InvalidSchemaError on empty entries, unknown Solidity types, invalid or
    duplicate field names.
    """
    if not schema.strip():
        raise InvalidSchemaError("Schema string is empty")

    fields: list[SchemaField] = []
    seen: set[str] = set()
    for i, entry in enumerate(schema.split(",")):
        parts = entry.split()
        if len(parts) != 2:
            raise InvalidSchemaError(
                f"Schema entry {i} must be '<type> <name>', got {entry.strip()!r}"
            )
        type_, name = parts
        field = SchemaField(type=type_, name=name)
        if _BASE_TYPE_RE.match(field.base_type) is None:
            raise InvalidSchemaError(f"Unknown type {type_!r} for field {name!r}")
        if _IDENTIFIER_RE.match(name) is None:
            raise InvalidSchemaError(f"Invalid field name {name!r}")
        if name in seen:
            raise InvalidSchemaError(f"Duplicate field name {name!r}")
        seen.add(name)
        fields.append(field)
    return tuple(fields)


@dataclass(frozen=True, slots=True)
class SchemaDefinition:
    """
    An Integra schema as submitted to `SchemaRegistry.register(schema, resolver, revocable)`.
    """

    name: str
    description: str
    schema: str
    revocable: bool
    resolver: str = const.ZERO_ADDRESS  # no resolver

    def __post_init__(self) -> None:
        validate_address(self.resolver, name="SchemaDefinition.resolver")
        parse_schema_fields(self.schema)

    @property
    def fields(self) -> tuple[SchemaField, ...]:
        return parse_schema_fields(self.schema)

    @property
    def has_resolver(self) -> bool:
        return self.resolver != const.ZERO_ADDRESS

    @property
    def uid(self) -> str:
        return compute_schema_uid(
            schema=self.schema, resolver=self.resolver, revocable=self.revocable
        )


ACCESS_CAPABILITY_SCHEMA: Final[SchemaDefinition] = SchemaDefinition(
    name=const.ACCESS_CAPABILITY_NAME,
    description=const.ACCESS_CAPABILITY_DESCRIPTION,
    schema=const.ACCESS_CAPABILITY_SCHEMA_STR,
    revocable=const.ACCESS_CAPABILITY_REVOCABLE,
    resolver=const.ZERO_ADDRESS,
)

# Simplified: counterparty commitments and privacy-preserving proofs are not part of it.
TRUST_CREDENTIAL_SCHEMA: Final[SchemaDefinition] = SchemaDefinition(
    name=const.TRUST_CREDENTIAL_NAME,
    description=const.TRUST_CREDENTIAL_DESCRIPTION,
    schema=const.TRUST_CREDENTIAL_SCHEMA_STR,
    revocable=const.TRUST_CREDENTIAL_REVOCABLE,
    resolver=const.ZERO_ADDRESS,
)

PAYMENT_PAYLOAD_SCHEMA: Final[SchemaDefinition] = SchemaDefinition(
    name=const.PAYMENT_PAYLOAD_NAME,
    description=const.PAYMENT_PAYLOAD_DESCRIPTION,
    schema=const.PAYMENT_PAYLOAD_SCHEMA_STR,
    revocable=const.PAYMENT_PAYLOAD_REVOCABLE,
    resolver=const.ZERO_ADDRESS,
)

INTEGRA_SCHEMAS: Final[Mapping[str, SchemaDefinition]] = MappingProxyType(
    {
        "ACCESS_CAPABILITY": ACCESS_CAPABILITY_SCHEMA,
        "TRUST_CREDENTIAL": TRUST_CREDENTIAL_SCHEMA,
        "PAYMENT_PAYLOAD": PAYMENT_PAYLOAD_SCHEMA,
    }
)
