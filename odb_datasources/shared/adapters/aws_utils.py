import aioboto3
from typing import Any, Dict, Optional
from botocore.config import Config as BotoConfig
from odb_datasources.core.exceptions import ConfigurationError
from odb_datasources.shared.core.config import get_settings
from odb_datasources.shared.core.constants import DEFAULT_AWS_REGION, ODB_SERVICE_NAME

# Mapping CamelCase to snake_case for aioboto3/boto3 credentials
AWS_CREDENTIAL_MAPPING = {
    "AccessKeyId": "aws_access_key_id",
    "SecretAccessKey": "aws_secret_access_key",
    "SessionToken": "aws_session_token",
    "aws_access_key_id": "aws_access_key_id",
    "aws_secret_access_key": "aws_secret_access_key",
    "aws_session_token": "aws_session_token",
}


def build_boto_config() -> BotoConfig:
    """
    Boto config for ODB reads.

    Reads are never retried: a single attempt either succeeds or is
    reported as a failed lookup.
    """
    settings = get_settings()
    return BotoConfig(
        read_timeout=settings.ODB_READ_TIMEOUT_SECONDS,
        connect_timeout=settings.ODB_CONNECT_TIMEOUT_SECONDS,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )


def map_aws_credentials(credentials: Optional[Dict[str, str]]) -> Dict[str, str]:
    """
    Maps credentials dictionary to valid boto3/aioboto3 kwargs.
    Handles both CamelCase (AWS standard) and snake_case (boto3) keys.
    """
    mapped: Dict[str, str] = {}
    if not credentials:
        return mapped

    for src, dst in AWS_CREDENTIAL_MAPPING.items():
        if src in credentials and credentials[src]:
            mapped[dst] = credentials[src]

    return mapped


def get_boto_session() -> aioboto3.Session:
    """Returns a fresh aioboto3 session."""
    return aioboto3.Session()


def resolve_aws_region_hint(region: Any) -> str:
    """
    Resolve the region a read should target.

    - Explicit region wins; it must be in the supported list when one is configured
    - Otherwise use configured AWS_DEFAULT_REGION
    - Final fallback is us-east-1
    """
    settings = get_settings()
    supported = {
        str(r).strip()
        for r in getattr(settings, "AWS_SUPPORTED_REGIONS", [])
        if str(r).strip()
    }
    candidate = str(region or "").strip()

    if candidate:
        if supported and candidate not in supported:
            raise ConfigurationError(
                f"Region {candidate!r} is not supported for {ODB_SERVICE_NAME}",
                details={"region": candidate, "supported": sorted(supported)},
            )
        return candidate

    configured_default = str(getattr(settings, "AWS_DEFAULT_REGION", "") or "").strip()
    if configured_default:
        return configured_default

    return DEFAULT_AWS_REGION


def settings_credentials() -> Dict[str, str]:
    """Static credentials from settings, empty when the default chain should be used."""
    settings = get_settings()
    return map_aws_credentials(
        {
            "aws_access_key_id": settings.AWS_ACCESS_KEY_ID or "",
            "aws_secret_access_key": settings.AWS_SECRET_ACCESS_KEY or "",
            "aws_session_token": settings.AWS_SESSION_TOKEN or "",
        }
    )


def get_odb_client(
    region: Optional[str] = None,
    credentials: Optional[Dict[str, str]] = None,
    session: Optional[aioboto3.Session] = None,
) -> Any:
    """
    Returns an async ODB client context manager.

    Explicit credentials take precedence over the ones from settings.
    """
    settings = get_settings()
    session = session or get_boto_session()

    kwargs: Dict[str, Any] = {
        "service_name": ODB_SERVICE_NAME,
        "region_name": resolve_aws_region_hint(region),
        "config": build_boto_config(),
    }
    if settings.AWS_ENDPOINT_URL:
        kwargs["endpoint_url"] = settings.AWS_ENDPOINT_URL

    kwargs.update(map_aws_credentials(credentials) or settings_credentials())

    return session.client(**kwargs)
