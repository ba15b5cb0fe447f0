import asyncio
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Type, TypeVar, Union

import structlog
from pydantic import ValidationError

from odb_datasources.core.exceptions import (
    ConfigValidationError,
    LookupFailedError,
    ReadError,
    TagLookupFailedError,
)
from odb_datasources.modules.odb.domain.models import DataSourceConfig, OdbRecord
from odb_datasources.shared.adapters.aws_utils import get_odb_client
from odb_datasources.shared.core.config import get_settings
from odb_datasources.shared.core.constants import ERR_ACTION_READING, ODB_SERVICE_HUMAN_NAME

logger = structlog.get_logger()

T = TypeVar("T")

# Builds an async ODB client context manager for an optional region
ClientFactory = Callable[[Optional[str]], Any]

ConfigInput = Union[DataSourceConfig, Mapping[str, Any], str]


def problem_message(data_source_name: str, identifier: str, cause: Any) -> str:
    """Standard read failure summary: action, service, data source, identifier, cause."""
    return f"{ERR_ACTION_READING} {ODB_SERVICE_HUMAN_NAME} {data_source_name} ({identifier}): {cause}"


def validate_config(config: ConfigInput) -> DataSourceConfig:
    """
    Validate data source input before any remote call.

    Accepts a config model, a mapping of attributes, or a bare identifier.
    """
    if isinstance(config, DataSourceConfig):
        return config
    payload = {"id": config} if isinstance(config, str) else dict(config)
    try:
        return DataSourceConfig.model_validate(payload)
    except ValidationError as e:
        raise ConfigValidationError(
            "Invalid data source configuration: the id attribute is required",
            details={"errors": e.errors(include_url=False)},
        ) from e


class OdbDataSource(ABC):
    """
    Abstract base class for ODB read-only data sources.

    A read performs exactly one Get* call and one tag listing, then flattens
    both into a fresh record. Nothing is retried and nothing is cached.
    """

    def __init__(self, client_factory: Optional[ClientFactory] = None):
        self._client_factory: ClientFactory = client_factory or get_odb_client

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Registry key, e.g. 'aws_odb_network'."""
        raise NotImplementedError

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name used in diagnostics."""
        raise NotImplementedError

    @property
    @abstractmethod
    def record_model(self) -> Type[OdbRecord]:
        raise NotImplementedError

    @abstractmethod
    async def _get_resource(self, client: Any, identifier: str) -> Dict[str, Any]:
        """Issue the Get* call and return the raw response."""
        raise NotImplementedError

    # Get* response member holding the resource, and the resource's ARN member
    response_key: str = ""
    arn_key: str = ""

    def _extract_resource(self, response: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
        return (response or {}).get(self.response_key)

    def _resource_arn(self, resource: Mapping[str, Any]) -> Optional[str]:
        return resource.get(self.arn_key)

    @abstractmethod
    def _flatten(
        self,
        resource: Mapping[str, Any],
        identifier: str,
        tags: Optional[Mapping[str, Any]],
    ) -> OdbRecord:
        raise NotImplementedError

    def schema(self) -> Dict[str, Any]:
        """Static description of the output attributes."""
        return self.record_model.model_json_schema()

    def _read_failure(
        self,
        error_cls: Type[ReadError],
        identifier: str,
        cause: Any,
        operation: str,
    ) -> ReadError:
        cause_text = str(cause) or type(cause).__name__
        return error_cls(
            problem_message(self.display_name, identifier, cause_text),
            details={
                "action": ERR_ACTION_READING,
                "data_source": self.display_name,
                "identifier": identifier,
                "operation": operation,
                "cause": cause_text,
            },
            cause_text=cause_text,
        )

    async def _remote_call(
        self,
        call: Awaitable[T],
        identifier: str,
        operation: str,
        error_cls: Type[ReadError],
    ) -> T:
        """
        Await one remote call bounded by ODB_READ_TIMEOUT_SECONDS.

        Cancellation propagates untouched; any other failure becomes ``error_cls``.
        """
        timeout = get_settings().ODB_READ_TIMEOUT_SECONDS
        try:
            return await asyncio.wait_for(call, timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.error(
                "odb_call_timed_out",
                data_source=self.type_name,
                identifier=identifier,
                operation=operation,
                timeout=timeout,
            )
            raise self._read_failure(
                error_cls, identifier, f"timed out after {timeout}s", operation
            ) from e
        except Exception as e:
            raise self._read_failure(error_cls, identifier, e, operation) from e

    async def read(self, config: ConfigInput) -> OdbRecord:
        """
        Read a fresh snapshot of the resource.

        Raises:
            ConfigValidationError: the identifier is missing.
            LookupFailedError: the Get* call failed or timed out.
            TagLookupFailedError: listing the tags failed.
        """
        cfg = validate_config(config)
        identifier = cfg.id
        log = logger.bind(data_source=self.type_name, identifier=identifier)
        log.debug("odb_read_started", region=cfg.region)

        async with self._client_factory(cfg.region) as client:
            try:
                response = await self._remote_call(
                    self._get_resource(client, identifier),
                    identifier,
                    operation="get",
                    error_cls=LookupFailedError,
                )
                resource = self._extract_resource(response)
                if resource is None:
                    raise self._read_failure(
                        LookupFailedError,
                        identifier,
                        "response did not include the resource",
                        operation="get",
                    )
                arn = self._resource_arn(resource)
                if not arn:
                    raise self._read_failure(
                        LookupFailedError,
                        identifier,
                        "response did not include the resource ARN",
                        operation="get",
                    )
            except LookupFailedError as e:
                log.error("odb_lookup_failed", error=e.details.get("cause"))
                raise

            try:
                tags_response = await self._remote_call(
                    client.list_tags_for_resource(resourceArn=arn),
                    identifier,
                    operation="list_tags",
                    error_cls=TagLookupFailedError,
                )
            except TagLookupFailedError as e:
                log.error("odb_tag_lookup_failed", arn=arn, error=e.details.get("cause"))
                raise

        tags = (tags_response or {}).get("tags")
        try:
            record = self._flatten(resource, identifier, tags)
        except (ValidationError, KeyError, TypeError, ValueError, AttributeError) as e:
            log.error("odb_response_invalid", error=str(e))
            raise self._read_failure(
                LookupFailedError, identifier, f"unexpected response shape: {e}", operation="get"
            ) from e

        log.info("odb_read_complete", arn=arn, tag_count=len(getattr(record, "tags", None) or {}))
        return record
