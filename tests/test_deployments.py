"""
Unit tests for integra_eas_schemas.deployments module.

Tests cover:
- EasDeployment valid construction
- EasDeployment constructor validation errors
- EasDeployment immutability and explorer URLs
- DEFAULT_DEPLOYMENTS canonical values
- get_deployment
"""

from dataclasses import FrozenInstanceError, replace

import pytest

from integra_eas_schemas import (
    ACCESS_CAPABILITY_SCHEMA,
    DEFAULT_DEPLOYMENTS,
    EasDeployment,
    IntegraSchemaError,
    InvalidAddressError,
    InvalidDeploymentError,
    UnknownNetworkError,
    get_deployment,
)
from integra_eas_schemas import constants as const

POLYGON = EasDeployment(
    network="polygon",
    chain_id=137,
    eas="0x5E634ef5355f45A855d02D66eCD687b1502AF790",
    schema_registry="0x7876EEF51A891E737AF8ba5A5E0f0Fd29073D5a7",
    eip712_proxy="0x4be71865917C7907ccA531270181D9B7dD4f2733",
    indexer="0x12d0f50Eb2d67b14293bdDA2C248358f3dfE5308",
    explorer="https://polygon.easscan.org",
)


class TestEasDeployment:
    """Tests for EasDeployment construction and validation."""

    def test_valid_initialization(self) -> None:
        assert POLYGON.network == "polygon"
        assert POLYGON.chain_id == 137

    @pytest.mark.parametrize("chain_id", [0, -1])
    def test_raises_on_non_positive_chain_id(self, chain_id: int) -> None:
        with pytest.raises(InvalidDeploymentError, match="chain_id"):
            replace(POLYGON, chain_id=chain_id)

    @pytest.mark.parametrize(
        "field", ["eas", "schema_registry", "eip712_proxy", "indexer"]
    )
    def test_raises_on_non_checksummed_address(self, field: str) -> None:
        address = getattr(POLYGON, field).lower()
        with pytest.raises(InvalidAddressError, match=field):
            replace(POLYGON, **{field: address})

    @pytest.mark.parametrize("address", ["", "0x", "0x1234", "5E634ef5355f45A855d02D66eCD687b1502AF790"])
    def test_raises_on_malformed_address(self, address: str) -> None:
        with pytest.raises(InvalidAddressError, match="20-byte"):
            replace(POLYGON, eas=address)

    @pytest.mark.parametrize(
        "explorer",
        ["http://polygon.easscan.org", "polygon.easscan.org", "https://polygon.easscan.org/", ""],
    )
    def test_raises_on_invalid_explorer(self, explorer: str) -> None:
        with pytest.raises(InvalidDeploymentError, match="explorer"):
            replace(POLYGON, explorer=explorer)

    def test_invalid_deployment_error_hierarchy(self) -> None:
        with pytest.raises(IntegraSchemaError):
            replace(POLYGON, chain_id=0)
        with pytest.raises(ValueError):
            replace(POLYGON, explorer="ftp://polygon.easscan.org")

    def test_instance_is_immutable(self) -> None:
        with pytest.raises(FrozenInstanceError):
            POLYGON.chain_id = 1  # type: ignore[misc]

    def test_schema_create_url(self) -> None:
        assert POLYGON.schema_create_url == "https://polygon.easscan.org/schema/create"

    def test_schema_url(self) -> None:
        uid = ACCESS_CAPABILITY_SCHEMA.uid
        assert POLYGON.schema_url(uid) == f"https://polygon.easscan.org/schema/view/{uid}"


class TestDefaultDeployments:
    """Tests for DEFAULT_DEPLOYMENTS canonical values."""

    def test_polygon_matches_expected_values(self) -> None:
        assert DEFAULT_DEPLOYMENTS["polygon"] == POLYGON

    def test_constants_match(self) -> None:
        assert const.POLYGON_CHAIN_ID == 137
        assert const.POLYGON_EAS_ADDR == POLYGON.eas
        assert const.POLYGON_SCHEMA_REGISTRY_ADDR == POLYGON.schema_registry
        assert const.POLYGON_EIP712_PROXY_ADDR == POLYGON.eip712_proxy
        assert const.POLYGON_INDEXER_ADDR == POLYGON.indexer
        assert const.POLYGON_EXPLORER_URL == POLYGON.explorer

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_DEPLOYMENTS["mainnet"] = POLYGON  # type: ignore[index]


class TestGetDeployment:
    """Tests for get_deployment."""

    def test_known_network(self) -> None:
        assert get_deployment("polygon") is DEFAULT_DEPLOYMENTS["polygon"]

    def test_unknown_network(self) -> None:
        with pytest.raises(UnknownNetworkError, match="'sepolia'.*polygon"):
            get_deployment("sepolia")

    def test_unknown_network_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            get_deployment("")
