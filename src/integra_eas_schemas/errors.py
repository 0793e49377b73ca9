from __future__ import annotations


class IntegraSchemaError(Exception):
    """Base class for all SDK errors."""


class InvalidAddressError(IntegraSchemaError, ValueError):
    """Raised when an EVM address is malformed or not EIP-55 checksummed."""


class InvalidSchemaError(IntegraSchemaError, ValueError):
    """Raised when an EAS schema string cannot be parsed."""


class InvalidRecordFieldError(IntegraSchemaError, ValueError):
    """Raised when an attestation record field does not fit its schema type."""


class SchemaFieldMismatchError(IntegraSchemaError, RuntimeError):
    """
    Raised when a record shape and its schema string have drifted apart.

    Attestations encoded with a drifted record would be rejected or misdecoded by EAS.
    """


class InvalidDeploymentError(IntegraSchemaError, ValueError):
    """Raised when an EAS deployment descriptor is not well-formed."""


class UnknownNetworkError(IntegraSchemaError, LookupError):
    """Raised when no EAS deployment is known for the requested network."""
