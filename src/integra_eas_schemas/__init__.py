# ruff: noqa: RUF022
"""
Integra EAS schemas Python SDK.

Static descriptions of the Integra V6 attestation schemas, the capability bitmask
carried by Access Capability attestations, and the known EAS deployments.

Public entrypoints:
- :func:`integra_eas_schemas.bitmasks.combine_capabilities`
- :func:`integra_eas_schemas.bitmasks.has_capability`
- :data:`integra_eas_schemas.schemas.INTEGRA_SCHEMAS`
- :data:`integra_eas_schemas.deployments.DEFAULT_DEPLOYMENTS`
"""

from __future__ import annotations

from . import bitmasks, constants, flags
from .bitmasks import combine_capabilities, has_capability
from .deployments import DEFAULT_DEPLOYMENTS, EasDeployment, get_deployment
from .errors import (
    IntegraSchemaError,
    InvalidAddressError,
    InvalidDeploymentError,
    InvalidRecordFieldError,
    InvalidSchemaError,
    SchemaFieldMismatchError,
    UnknownNetworkError,
)
from .hashing import compute_schema_uid, keccak256
from .models import (
    RECORD_SHAPES,
    AccessCapabilityData,
    AttestationRecord,
    Capability,
    PaymentPayloadData,
    TrustCredentialData,
    verify_record_shape,
    verify_record_shapes,
)
from .schemas import (
    ACCESS_CAPABILITY_SCHEMA,
    INTEGRA_SCHEMAS,
    PAYMENT_PAYLOAD_SCHEMA,
    TRUST_CREDENTIAL_SCHEMA,
    SchemaDefinition,
    SchemaField,
    parse_schema_fields,
)

__all__ = [
    # Capabilities
    "Capability",
    "combine_capabilities",
    "has_capability",
    # Schemas
    "ACCESS_CAPABILITY_SCHEMA",
    "TRUST_CREDENTIAL_SCHEMA",
    "PAYMENT_PAYLOAD_SCHEMA",
    "INTEGRA_SCHEMAS",
    "SchemaDefinition",
    "SchemaField",
    "parse_schema_fields",
    # Records
    "AttestationRecord",
    "AccessCapabilityData",
    "TrustCredentialData",
    "PaymentPayloadData",
    "RECORD_SHAPES",
    "verify_record_shape",
    "verify_record_shapes",
    # Deployments
    "DEFAULT_DEPLOYMENTS",
    "EasDeployment",
    "get_deployment",
    # Errors
    "IntegraSchemaError",
    "InvalidAddressError",
    "InvalidDeploymentError",
    "InvalidRecordFieldError",
    "InvalidSchemaError",
    "SchemaFieldMismatchError",
    "UnknownNetworkError",
    # Hashing
    "compute_schema_uid",
    "keccak256",
    # Bitmasks
    "bitmasks",
    # Constants
    "constants",
    # Flags
    "flags",
]
