"""
Structural validation of SCIM resources.

Each validator raises ``MissingRequiredField`` for the first required attribute
it finds empty or absent, checking in the order the attributes are listed. No
value-level checks are made.
"""
from scim_v2.exceptions import MissingRequiredField
from scim_v2.schemas import (
    EnterpriseUser,
    Group,
    ResourceType,
    ServiceProviderConfig,
    User,
)


def validate_user(user: User) -> None:
    # Everything but these two is optional in the core schema
    if not user.schemas:
        raise MissingRequiredField("schemas")
    if not user.user_name:
        raise MissingRequiredField("user_name")


def validate_group(group: Group) -> None:
    if not group.schemas:
        raise MissingRequiredField("schemas")
    if not group.id:
        raise MissingRequiredField("id")
    if not group.display_name:
        raise MissingRequiredField("display_name")


def validate_resource_type(resource_type: ResourceType) -> None:
    if not resource_type.name:
        raise MissingRequiredField("name")
    if not resource_type.endpoint:
        raise MissingRequiredField("endpoint")
    if not resource_type.schema_uri:
        raise MissingRequiredField("schema")


def validate_service_provider_config(config: ServiceProviderConfig) -> None:
    """Require every capability to be advertised as supported.

    A capability with ``supported = false`` is reported as missing.
    """
    capabilities = [
        ("patch", config.patch),
        ("bulk", config.bulk),
        ("filter", config.filter),
        ("change_password", config.change_password),
        ("sort", config.sort),
        ("etag", config.etag),
    ]
    for field_name, capability in capabilities:
        if not capability.supported:
            raise MissingRequiredField(field_name)


def validate_enterprise_user(enterprise_user: EnterpriseUser) -> None:
    required = [
        "employee_number",
        "cost_center",
        "organization",
        "division",
        "department",
        "manager",
    ]
    for field_name in required:
        if getattr(enterprise_user, field_name) is None:
            raise MissingRequiredField(field_name)
