from __future__ import annotations

from typing import Callable, Dict, List, Optional

from odb_datasources.core.exceptions import UnknownDataSourceError
from odb_datasources.modules.odb.domain.plugin import ClientFactory, OdbDataSource

DataSourceConstructor = Callable[..., OdbDataSource]


class DataSourceRegistry:
    """
    Registry and Factory for ODB data sources.
    Uses the data source type name (e.g. 'aws_odb_network') as the lookup key.
    """

    def __init__(self) -> None:
        self._registry: Dict[str, DataSourceConstructor] = {}

    @staticmethod
    def _type_key(type_name: str) -> str:
        key = str(type_name or "").strip().lower()
        if not key:
            raise ValueError("Type name is required to resolve a data source")
        return key

    def register(self, type_name: str, constructor: DataSourceConstructor) -> DataSourceConstructor:
        key = self._type_key(type_name)
        existing = self._registry.get(key)
        # Re-registering the same constructor is a no-op; a different one is a conflict.
        if existing is not None and existing is not constructor:
            raise ValueError(
                f"Duplicate data source registration for {key}: "
                f"{getattr(existing, '__name__', existing)} vs {getattr(constructor, '__name__', constructor)}"
            )
        self._registry[key] = constructor
        return constructor

    def type_names(self) -> List[str]:
        return sorted(self._registry)

    def create(
        self, type_name: str, client_factory: Optional[ClientFactory] = None
    ) -> OdbDataSource:
        """Returns a new data source instance for the given type name."""
        key = self._type_key(type_name)
        constructor = self._registry.get(key)
        if constructor is None:
            available = ", ".join(self.type_names()) or "none"
            raise UnknownDataSourceError(
                f"No data source registered for {key}. Available: {available}",
                details={"type_name": key},
            )
        return constructor(client_factory=client_factory)


def default_registry() -> DataSourceRegistry:
    """Registry with every ODB data source, built explicitly at startup."""
    from odb_datasources.modules.odb.adapters import (
        cloud_autonomous_vm_cluster,
        network,
        network_peering_connection,
    )

    registry = DataSourceRegistry()
    registry.register(
        cloud_autonomous_vm_cluster.TYPE_NAME,
        cloud_autonomous_vm_cluster.CloudAutonomousVmClusterDataSource,
    )
    registry.register(network.TYPE_NAME, network.OdbNetworkDataSource)
    registry.register(
        network_peering_connection.TYPE_NAME,
        network_peering_connection.OdbNetworkPeeringConnectionDataSource,
    )
    return registry
