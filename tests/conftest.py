"""
Global pytest fixtures for the ODB data source test suite.

Provides:
- Test settings isolation
- Mock aioboto3 ODB clients (async context managers)
- Canned ODB API responses
"""
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

# Set test environment BEFORE any package imports
os.environ["TESTING"] = "true"
os.environ["ENVIRONMENT"] = "development"
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
for _var in (
    "AWS_ENDPOINT_URL",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_SUPPORTED_REGIONS",
    "ODB_READ_TIMEOUT_SECONDS",
    "ODB_CONNECT_TIMEOUT_SECONDS",
):
    os.environ.pop(_var, None)

from odb_datasources.shared.core.config import get_settings  # noqa: E402
from tests.utils import (  # noqa: E402
    ACCOUNT,
    CREATED_AT,
    NETWORK_ARN,
    NETWORK_ID,
    PEERING_ARN,
    PEERING_ID,
    VM_CLUSTER_ARN,
    VM_CLUSTER_ID,
    make_odb_client,
)


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def odb_client() -> MagicMock:
    return make_odb_client()


@pytest.fixture
def client_factory(odb_client) -> MagicMock:
    return MagicMock(return_value=odb_client)


@pytest.fixture
def maintenance_window_payload() -> Dict[str, Any]:
    return {
        "daysOfWeek": [{"name": "MONDAY"}, {"name": "WEDNESDAY"}],
        "hoursOfDay": [2, 14],
        "leadTimeInWeeks": 4,
        "months": [{"name": "JANUARY"}],
        "preference": "NO_PREFERENCE",
        "weeksOfMonth": [1, 3],
    }


@pytest.fixture
def vm_cluster_payload(maintenance_window_payload) -> Dict[str, Any]:
    return {
        "cloudAutonomousVmClusterId": VM_CLUSTER_ID,
        "cloudAutonomousVmClusterArn": VM_CLUSTER_ARN,
        "odbNetworkId": NETWORK_ID,
        "ociResourceAnchorName": "anchor-east",
        "percentProgress": 100.0,
        "displayName": "prod-avmc",
        "status": "AVAILABLE",
        "statusReason": "ready",
        "cloudExadataInfrastructureId": "exa-0011",
        "autonomousDataStoragePercentage": 42.5,
        "autonomousDataStorageSizeInTBs": 10.0,
        "availableAutonomousDataStorageSizeInTBs": 5.75,
        "availableContainerDatabases": 6,
        "availableCpus": 24.0,
        "computeModel": "ECPU",
        "cpuCoreCount": 32,
        "cpuCoreCountPerNode": 16,
        "cpuPercentage": 25.0,
        "dataStorageSizeInGBs": 2048.0,
        "dataStorageSizeInTBs": 2.0,
        "dbNodeStorageSizeInGBs": 300,
        "dbServers": ["dbs-1", "dbs-2"],
        "description": "primary cluster",
        "domain": "example.oraclevcn.com",
        "exadataStorageInTBsLowestScaledValue": 1.5,
        "hostname": "avmc-host",
        "ocid": "ocid1.autonomousvmcluster.oc1..aaaa",
        "ociUrl": "https://cloud.oracle.com/avmc/aaaa",
        "isMtlsEnabledVmCluster": True,
        "licenseModel": "LICENSE_INCLUDED",
        "maintenanceWindow": maintenance_window_payload,
        "maxAcdsLowestScaledValue": 4,
        "memoryPerOracleComputeUnitInGBs": 2,
        "memorySizeInGBs": 512,
        "nodeCount": 2,
        "nonProvisionableAutonomousContainerDatabases": 1,
        "provisionableAutonomousContainerDatabases": 5,
        "provisionedAutonomousContainerDatabases": 2,
        "provisionedCpus": 8.0,
        "reclaimableCpus": 0.0,
        "reservedCpus": 2.0,
        "scanListenerPortNonTls": 1521,
        "scanListenerPortTls": 2484,
        "shape": "Exadata.X11M",
        "createdAt": CREATED_AT,
        "timeDatabaseSslCertificateExpires": datetime(
            2026, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=2))
        ),
        "timeOrdsCertificateExpires": None,
        "timeZone": "UTC",
        "totalContainerDatabases": 8,
        "totalAutonomousDataStorageInTBs": 12.0,
        "totalCpus": 64.0,
    }


@pytest.fixture
def network_payload() -> Dict[str, Any]:
    return {
        "odbNetworkId": NETWORK_ID,
        "displayName": "prod-odbnet",
        "status": "AVAILABLE",
        "statusReason": "ready",
        "odbNetworkArn": NETWORK_ARN,
        "availabilityZone": "us-east-1a",
        "availabilityZoneId": "use1-az4",
        "clientSubnetCidr": "10.0.1.0/24",
        "backupSubnetCidr": "10.0.2.0/24",
        "customDomainName": "db.example.com",
        "defaultDnsPrefix": "odbnet",
        "peeredCidrs": ["172.16.0.0/16"],
        "ociNetworkAnchorId": "ocid1.networkanchor.oc1..bbbb",
        "ociNetworkAnchorUrl": "https://cloud.oracle.com/anchor/bbbb",
        "ociResourceAnchorName": "anchor-east",
        "ociVcnId": "ocid1.vcn.oc1..cccc",
        "ociVcnUrl": "https://cloud.oracle.com/vcn/cccc",
        "ociDnsForwardingConfigs": [
            {"domainName": "db.example.com", "ociDnsListenerIp": "10.0.1.53"},
        ],
        "createdAt": CREATED_AT,
        "percentProgress": 100.0,
        "managedServices": {
            "serviceNetworkArn": "arn:aws:vpc-lattice:us-east-1:123456789012:servicenetwork/sn-1",
            "resourceGatewayArn": "arn:aws:vpc-lattice:us-east-1:123456789012:resourcegateway/rgw-1",
            "managedServicesIpv4Cidrs": ["10.0.3.0/28"],
            "serviceNetworkEndpoint": {
                "vpcEndpointId": "vpce-0123",
                "vpcEndpointType": "SERVICENETWORK",
            },
            "managedS3BackupAccess": {
                "status": "ENABLED",
                "ipv4Addresses": ["10.0.3.4", "10.0.3.5"],
            },
            "zeroEtlAccess": {"status": "DISABLED", "cidr": "10.0.4.0/28"},
            "s3Access": {
                "status": "ENABLING",
                "ipv4Addresses": ["10.0.3.6"],
                "domainName": "s3.us-east-1.amazonaws.com",
                "s3PolicyDocument": '{"Version": "2012-10-17"}',
            },
        },
    }


@pytest.fixture
def peering_payload() -> Dict[str, Any]:
    return {
        "odbPeeringConnectionId": PEERING_ID,
        "displayName": "prod-peering",
        "status": "AVAILABLE",
        "statusReason": "ready",
        "odbPeeringConnectionArn": PEERING_ARN,
        "odbNetworkArn": NETWORK_ARN,
        "peerNetworkArn": f"arn:aws:ec2:us-east-1:{ACCOUNT}:vpc/vpc-0abc",
        "odbPeeringConnectionType": "VPC",
        "createdAt": CREATED_AT,
        "percentProgress": 100.0,
    }
