"""
JSON codec for SCIM resources.

Every model field is bound to its SCIM attribute name through a pydantic alias
(``userName``, ``$ref``, the enterprise extension URN, ...). Encoding emits only
the attributes that are present; ``None`` means absent and is never written out.
Decoding reads canonical attribute names only, treats ``null`` as absent for
optional attributes, and ignores unknown top-level attributes unless strict
decoding is requested.
"""
import json
from typing import Any, Callable, Dict, Optional, Set, Type, TypeVar, Union
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from scim_v2.config import settings
from scim_v2.exceptions import DeserializationError, SerializationError
from scim_v2.schemas import (
    EnterpriseUser,
    Group,
    ResourceType,
    SCIMModel,
    SCIMSchemaUri,
    ServiceProviderConfig,
    User,
)
from scim_v2.utils.logging import get_logger


logger = get_logger(__name__)

M = TypeVar("M", bound=SCIMModel)

JSONInput = Union[str, bytes, bytearray]

LEGACY_ENTERPRISE_KEY = "urn:scim:schemas:extension:enterprise:2.0"


def wire_names(model_cls: Type[SCIMModel]) -> Set[str]:
    """Top-level attribute names a model reads and writes."""
    return {
        field.alias or name
        for name, field in model_cls.model_fields.items()
    }


def to_json(resource: SCIMModel, indent: Optional[int] = None) -> str:
    logger.debug(f"Encoding {type(resource).__name__}")
    try:
        return resource.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
    except PydanticSerializationError as exc:
        raise SerializationError(exc) from exc


def from_json(
    model_cls: Type[M],
    data: JSONInput,
    strict: Optional[bool] = None,
    prepare: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None,
) -> M:
    """Decode ``data`` into a fresh ``model_cls`` instance.

    ``strict`` overrides ``settings.strict_decode``; when enabled, top-level
    attributes the model does not define are reported instead of dropped.
    ``prepare`` may rewrite the parsed top-level object before validation.
    """
    logger.debug(f"Decoding {model_cls.__name__}")
    try:
        payload = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DeserializationError(exc) from exc

    if isinstance(payload, dict):
        if prepare is not None:
            payload = prepare(payload)

        if strict is None:
            strict = settings.strict_decode
        if strict:
            unknown = sorted(set(payload) - wire_names(model_cls))
            if unknown:
                raise DeserializationError(
                    ValueError(f"Unknown attributes for {model_cls.__name__}: {', '.join(unknown)}")
                )

    # Validated as JSON in strict mode so values of the wrong JSON type are
    # rejected rather than coerced ("yes" or 1 for a boolean, "200" for an integer).
    try:
        return model_cls.model_validate_json(json.dumps(payload), strict=True, by_alias=True, by_name=False)
    except ValidationError as exc:
        raise DeserializationError(exc) from exc


def _accept_legacy_enterprise_key(payload: Dict[str, Any]) -> Dict[str, Any]:
    # Some identity providers (OneLogin) send the enterprise block under a
    # non-standard key.
    if not settings.accept_legacy_enterprise_key:
        return payload

    standard_key = SCIMSchemaUri.ENTERPRISE_USER.value
    if LEGACY_ENTERPRISE_KEY in payload and standard_key not in payload:
        logger.debug("Detected non-standard enterprise extension key, reading it as the RFC-compliant one")
        payload = dict(payload)
        payload[standard_key] = payload.pop(LEGACY_ENTERPRISE_KEY)
    return payload


# User

def user_to_json(user: User, indent: Optional[int] = None) -> str:
    return to_json(user, indent=indent)


def user_from_json(data: JSONInput, strict: Optional[bool] = None) -> User:
    return from_json(User, data, strict=strict, prepare=_accept_legacy_enterprise_key)


# Group

def group_to_json(group: Group, indent: Optional[int] = None) -> str:
    return to_json(group, indent=indent)


def group_from_json(data: JSONInput, strict: Optional[bool] = None) -> Group:
    return from_json(Group, data, strict=strict)


# ResourceType

def resource_type_to_json(resource_type: ResourceType, indent: Optional[int] = None) -> str:
    return to_json(resource_type, indent=indent)


def resource_type_from_json(data: JSONInput, strict: Optional[bool] = None) -> ResourceType:
    return from_json(ResourceType, data, strict=strict)


# ServiceProviderConfig

def service_provider_config_to_json(config: ServiceProviderConfig, indent: Optional[int] = None) -> str:
    return to_json(config, indent=indent)


def service_provider_config_from_json(data: JSONInput, strict: Optional[bool] = None) -> ServiceProviderConfig:
    return from_json(ServiceProviderConfig, data, strict=strict)


# EnterpriseUser

def enterprise_user_to_json(enterprise_user: EnterpriseUser, indent: Optional[int] = None) -> str:
    return to_json(enterprise_user, indent=indent)


def enterprise_user_from_json(data: JSONInput, strict: Optional[bool] = None) -> EnterpriseUser:
    return from_json(EnterpriseUser, data, strict=strict)
