from __future__ import annotations

import dataclasses
import enum
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, Final, TypeVar

from . import bitmasks
from .errors import InvalidRecordFieldError, SchemaFieldMismatchError
from .schemas import (
    ACCESS_CAPABILITY_SCHEMA,
    PAYMENT_PAYLOAD_SCHEMA,
    TRUST_CREDENTIAL_SCHEMA,
    SchemaDefinition,
    SchemaField,
)
from .validation import coerce_bytes32, is_uint256

logger = logging.getLogger(__name__)

_R = TypeVar("_R", bound="AttestationRecord")

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")

# Schema type -> annotation of the mirroring record field
_PY_TYPES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "bytes32": "bytes",
        "uint256": "int",
        "string": "str",
    }
)


def _snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY_RE.sub("_", name).lower()


class Capability(enum.IntFlag):
    CLAIM_TOKEN = bitmasks.MASK_CLAIM_TOKEN
    TRANSFER_TOKEN = bitmasks.MASK_TRANSFER_TOKEN
    REQUEST_PAYMENT = bitmasks.MASK_REQUEST_PAYMENT
    APPROVE_PAYMENT = bitmasks.MASK_APPROVE_PAYMENT
    UPDATE_METADATA = bitmasks.MASK_UPDATE_METADATA
    DELEGATE_RIGHTS = bitmasks.MASK_DELEGATE_RIGHTS
    REVOKE_ACCESS = bitmasks.MASK_REVOKE_ACCESS
    ADMIN = bitmasks.MASK_ADMIN

    @classmethod
    def names(cls, mask: int) -> tuple[str, ...]:
        """Names of the known capabilities set in `mask`, LSB first. Unknown bits are ignored."""
        return tuple(
            cap.name for cap in cls if bitmasks.has_capability(mask, cap)
        )


class AttestationRecord:
    """
    Base of the record shapes mirroring an Integra schema's tuple layout.

    Subclasses are frozen dataclasses whose fields follow `SCHEMA.fields` in order,
    named in snake_case.
    """

    __slots__ = ()

    SCHEMA: ClassVar[SchemaDefinition]

    def _validate(self) -> None:
        for f, sf in zip(dataclasses.fields(self), self.SCHEMA.fields, strict=True):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if sf.type == "bytes32":
                object.__setattr__(self, f.name, coerce_bytes32(value, name=sf.name))
            elif sf.type == "uint256":
                if not is_uint256(value):
                    raise InvalidRecordFieldError(f"{sf.name} must fit in uint256")
            elif sf.type == "string":
                if not isinstance(value, str):
                    raise InvalidRecordFieldError(f"{sf.name} must be a string")
            else:
                raise InvalidRecordFieldError(
                    f"{sf.name} has unsupported schema type {sf.type!r}"
                )

    @classmethod
    def from_dict(cls: type[_R], data: Mapping[str, Any]) -> _R:
        """
        Build a record from a mapping keyed by the schema's (camelCase) field names.
        """
        expected = [sf.name for sf in cls.SCHEMA.fields]
        missing = [k for k in expected if k not in data]
        if missing:
            raise InvalidRecordFieldError(f"Missing fields: {', '.join(missing)}")
        unexpected = sorted(set(data) - set(expected))
        if unexpected:
            raise InvalidRecordFieldError(f"Unexpected fields: {', '.join(unexpected)}")
        return cls(**{_snake_case(k): data[k] for k in expected})

    def to_dict(self) -> dict[str, object]:
        """Return the record keyed by schema field names, with bytes32 values as 0x hex."""
        out: dict[str, object] = {}
        for f, sf in zip(dataclasses.fields(self), self.SCHEMA.fields, strict=True):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            out[sf.name] = "0x" + value.hex() if isinstance(value, bytes) else value
        return out

    def to_tuple(self) -> tuple[object, ...]:
        """Return field values in schema order."""
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class AccessCapabilityData(AttestationRecord):
    SCHEMA: ClassVar[SchemaDefinition] = ACCESS_CAPABILITY_SCHEMA

    document_hash: bytes
    token_id: int
    capabilities: int  # bitmask, see `bitmasks`
    verified_identity: str  # e.g. "john@example.com"
    verification_method: str  # e.g. "email", "docusign", "video-call"
    verification_date: int  # unix timestamp
    contract_role: str  # e.g. "Tenant", "Landlord", "Investor"
    legal_entity_type: str  # e.g. "Individual", "Corporation", "Trust"
    notes: str = ""

    def __post_init__(self) -> None:
        self._validate()

    def has_capability(self, capability: int) -> bool:
        return bitmasks.has_capability(self.capabilities, capability)

    @property
    def capability_names(self) -> tuple[str, ...]:
        return Capability.names(self.capabilities)


@dataclass(frozen=True, slots=True)
class TrustCredentialData(AttestationRecord):
    SCHEMA: ClassVar[SchemaDefinition] = TRUST_CREDENTIAL_SCHEMA

    credential_hash: bytes

    def __post_init__(self) -> None:
        self._validate()


@dataclass(frozen=True, slots=True)
class PaymentPayloadData(AttestationRecord):
    SCHEMA: ClassVar[SchemaDefinition] = PAYMENT_PAYLOAD_SCHEMA

    payload_hash: bytes

    def __post_init__(self) -> None:
        self._validate()


RECORD_SHAPES: Final[Mapping[str, type[AttestationRecord]]] = MappingProxyType(
    {
        "ACCESS_CAPABILITY": AccessCapabilityData,
        "TRUST_CREDENTIAL": TrustCredentialData,
        "PAYMENT_PAYLOAD": PaymentPayloadData,
    }
)


def _describe(fields: list[SchemaField] | tuple[SchemaField, ...]) -> str:
    return ", ".join(f"{sf.type} {sf.name}" for sf in fields)


def verify_record_shape(record_type: type[AttestationRecord]) -> None:
    """
    Check that `record_type` mirrors its schema string field-for-field.

    Raises SchemaFieldMismatchError on any difference in field count, order, name or type.
    """
    schema_fields = record_type.SCHEMA.fields
    record_fields = dataclasses.fields(record_type)  # type: ignore[arg-type]

    expected = [(_snake_case(sf.name), _PY_TYPES.get(sf.type)) for sf in schema_fields]
    actual = [
        (f.name, f.type if isinstance(f.type, str) else f.type.__name__)
        for f in record_fields
    ]
    if expected != actual:
        raise SchemaFieldMismatchError(
            f"{record_type.__name__} fields {actual} do not match "
            f"schema '{_describe(schema_fields)}'"
        )
    logger.debug("%s matches schema %r", record_type.__name__, record_type.SCHEMA.name)


def verify_record_shapes(
    shapes: Mapping[str, type[AttestationRecord]] = RECORD_SHAPES,
) -> None:
    """Run `verify_record_shape` over every known record type."""
    for key, record_type in shapes.items():
        try:
            verify_record_shape(record_type)
        except SchemaFieldMismatchError:
            logger.error("Record shape %s drifted from its schema", key)
            raise
