from typing import Any, Dict, Mapping, Optional, Type

from odb_datasources.modules.odb.domain.flatten import flatten_odb_network
from odb_datasources.modules.odb.domain.models import OdbNetworkRecord
from odb_datasources.modules.odb.domain.plugin import OdbDataSource

TYPE_NAME = "aws_odb_network"
DS_NAME = "Odb Network Data Source"


class OdbNetworkDataSource(OdbDataSource):
    """Looks up an ODB network, including its managed services."""

    response_key = "odbNetwork"
    arn_key = "odbNetworkArn"

    @property
    def type_name(self) -> str:
        return TYPE_NAME

    @property
    def display_name(self) -> str:
        return DS_NAME

    @property
    def record_model(self) -> Type[OdbNetworkRecord]:
        return OdbNetworkRecord

    async def _get_resource(self, client: Any, identifier: str) -> Dict[str, Any]:
        return await client.get_odb_network(odbNetworkId=identifier)

    def _flatten(
        self,
        resource: Mapping[str, Any],
        identifier: str,
        tags: Optional[Mapping[str, Any]],
    ) -> OdbNetworkRecord:
        return flatten_odb_network(resource, identifier, tags)
