"""
Typed models and a JSON codec for SCIM 2.0 resources (RFC 7643 / RFC 7644).

For each of User, Group, ResourceType, ServiceProviderConfig and EnterpriseUser
there is a ``validate_*``, a ``*_to_json`` and a ``*_from_json`` function.
"""
from .codec import (
    to_json,
    from_json,
    user_to_json,
    user_from_json,
    group_to_json,
    group_from_json,
    resource_type_to_json,
    resource_type_from_json,
    service_provider_config_to_json,
    service_provider_config_from_json,
    enterprise_user_to_json,
    enterprise_user_from_json,
)
from .validators import (
    validate_user,
    validate_group,
    validate_resource_type,
    validate_service_provider_config,
    validate_enterprise_user,
)
from .exceptions import (
    SCIMError,
    MissingRequiredField,
    InvalidFieldValue,
    SerializationError,
    DeserializationError,
)
from .schemas import (
    User,
    Group,
    ResourceType,
    ServiceProviderConfig,
    EnterpriseUser,
    SCIMSchemaUri,
)

# Older names for the decoders
json_to_user = user_from_json
json_to_group = group_from_json
json_to_resource_type = resource_type_from_json
json_to_service_provider_config = service_provider_config_from_json
json_to_enterprise_user = enterprise_user_from_json

__all__ = [
    # Codec
    "to_json",
    "from_json",
    "user_to_json",
    "user_from_json",
    "json_to_user",
    "group_to_json",
    "group_from_json",
    "json_to_group",
    "resource_type_to_json",
    "resource_type_from_json",
    "json_to_resource_type",
    "service_provider_config_to_json",
    "service_provider_config_from_json",
    "json_to_service_provider_config",
    "enterprise_user_to_json",
    "enterprise_user_from_json",
    "json_to_enterprise_user",
    # Validators
    "validate_user",
    "validate_group",
    "validate_resource_type",
    "validate_service_provider_config",
    "validate_enterprise_user",
    # Errors
    "SCIMError",
    "MissingRequiredField",
    "InvalidFieldValue",
    "SerializationError",
    "DeserializationError",
    # Models
    "User",
    "Group",
    "ResourceType",
    "ServiceProviderConfig",
    "EnterpriseUser",
    "SCIMSchemaUri",
]
