from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from . import constants as const
from .errors import InvalidDeploymentError, UnknownNetworkError
from .validation import is_https_url, validate_address


@dataclass(frozen=True, slots=True)
class EasDeployment:
    """
    A known deployment of the Ethereum Attestation Service contracts.

    The deployment list is data-only so it can be extended without affecting the rest
    of the SDK.
    """

    network: str
    chain_id: int
    eas: str
    schema_registry: str
    eip712_proxy: str
    indexer: str
    explorer: str

    def __post_init__(self) -> None:
        if self.chain_id <= 0:
            raise InvalidDeploymentError("`EasDeployment.chain_id` must be positive")
        for name in ("eas", "schema_registry", "eip712_proxy", "indexer"):
            validate_address(getattr(self, name), name=f"EasDeployment.{name}")
        if not is_https_url(self.explorer) or self.explorer.endswith("/"):
            raise InvalidDeploymentError(
                "`EasDeployment.explorer` must be an https URL without trailing slash"
            )

    @property
    def schema_create_url(self) -> str:
        """Explorer page for registering a new schema."""
        return f"{self.explorer}/schema/create"

    def schema_url(self, uid: str) -> str:
        """Explorer page of a registered schema."""
        return f"{self.explorer}/schema/view/{uid}"


DEFAULT_DEPLOYMENTS: Final[Mapping[str, EasDeployment]] = MappingProxyType(
    {
        "polygon": EasDeployment(
            network="polygon",
            chain_id=const.POLYGON_CHAIN_ID,
            eas=const.POLYGON_EAS_ADDR,
            schema_registry=const.POLYGON_SCHEMA_REGISTRY_ADDR,
            eip712_proxy=const.POLYGON_EIP712_PROXY_ADDR,
            indexer=const.POLYGON_INDEXER_ADDR,
            explorer=const.POLYGON_EXPLORER_URL,
        ),
    }
)


def get_deployment(network: str) -> EasDeployment:
    try:
        return DEFAULT_DEPLOYMENTS[network]
    except KeyError as e:
        known = ", ".join(sorted(DEFAULT_DEPLOYMENTS))
        raise UnknownNetworkError(
            f"No EAS deployment known for network {network!r} (known: {known})"
        ) from e
