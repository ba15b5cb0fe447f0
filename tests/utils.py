from datetime import datetime, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock

ACCOUNT = "123456789012"
VM_CLUSTER_ID = "avmc-1a2b3c4d"
NETWORK_ID = "odbnet-5e6f7a8b"
PEERING_ID = "odbpcx-9c0d1e2f"

VM_CLUSTER_ARN = f"arn:aws:odb:us-east-1:{ACCOUNT}:cloud-autonomous-vm-cluster/{VM_CLUSTER_ID}"
NETWORK_ARN = f"arn:aws:odb:us-east-1:{ACCOUNT}:odb-network/{NETWORK_ID}"
PEERING_ARN = f"arn:aws:odb:us-east-1:{ACCOUNT}:odb-peering-connection/{PEERING_ID}"

CREATED_AT = datetime(2025, 6, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)

DEFAULT_TAGS = {"env": "prod", "team": "dba"}


def make_odb_client(tags: Any = DEFAULT_TAGS) -> MagicMock:
    """Mock aioboto3 ODB client usable as an async context manager."""
    client = MagicMock()
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    client.list_tags_for_resource = AsyncMock(return_value={"tags": tags})
    return client
