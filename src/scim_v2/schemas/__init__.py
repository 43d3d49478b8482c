from .base import (
    BaseResource,
    Meta,
    MultiValuedAttribute,
    Name,
    Address,
    Reference,
    SCIMModel,
    SCIMSchemaUri,
)
from .user import (
    User,
    Email,
    PhoneNumber,
    Im,
    Photo,
    Entitlement,
    Role,
    X509Certificate,
    EnterpriseUser,
    Manager,
    UserGroup,
)
from .group import (
    Group,
    GroupMember,
)
from .meta import (
    ResourceType,
    SchemaExtension,
    ServiceProviderConfig,
    Supported,
    PatchConfig,
    BulkConfig,
    FilterConfig,
    ChangePasswordConfig,
    SortConfig,
    ETagConfig,
    AuthenticationScheme,
)

__all__ = [
    # Base
    "BaseResource",
    "Meta",
    "MultiValuedAttribute",
    "Name",
    "Address",
    "Reference",
    "SCIMModel",
    "SCIMSchemaUri",
    # User
    "User",
    "Email",
    "PhoneNumber",
    "Im",
    "Photo",
    "Entitlement",
    "Role",
    "X509Certificate",
    "EnterpriseUser",
    "Manager",
    "UserGroup",
    # Group
    "Group",
    "GroupMember",
    # Meta
    "ResourceType",
    "SchemaExtension",
    "ServiceProviderConfig",
    "Supported",
    "PatchConfig",
    "BulkConfig",
    "FilterConfig",
    "ChangePasswordConfig",
    "SortConfig",
    "ETagConfig",
    "AuthenticationScheme",
]
