from typing import List, Optional
from pydantic import Field
from .base import SCIMModel, Meta


class SchemaExtension(SCIMModel):
    schema_uri: str = Field(..., alias="schema")
    required: bool


class ResourceType(SCIMModel):
    schemas: Optional[List[str]] = None
    id: Optional[str] = None
    name: str
    endpoint: str
    description: Optional[str] = None
    schema_uri: str = Field(..., alias="schema")
    schema_extensions: Optional[List[SchemaExtension]] = Field(None, alias="schemaExtensions")
    meta: Optional[Meta] = None


class Supported(SCIMModel):
    """A capability that is only advertised as supported or not."""
    supported: bool


class PatchConfig(Supported):
    pass


class BulkConfig(Supported):
    max_operations: Optional[int] = Field(None, alias="maxOperations")
    max_payload_size: Optional[int] = Field(None, alias="maxPayloadSize")


class FilterConfig(Supported):
    max_results: Optional[int] = Field(None, alias="maxResults")


class ChangePasswordConfig(Supported):
    pass


class SortConfig(Supported):
    pass


class ETagConfig(Supported):
    pass


class AuthenticationScheme(SCIMModel):
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    spec_uri: Optional[str] = Field(None, alias="specUri")
    documentation_uri: Optional[str] = Field(None, alias="documentationUri")
    primary: Optional[bool] = None


class ServiceProviderConfig(SCIMModel):
    schemas: Optional[List[str]] = None
    documentation_uri: Optional[str] = Field(None, alias="documentationUri")
    patch: PatchConfig
    bulk: BulkConfig
    filter: FilterConfig
    change_password: ChangePasswordConfig = Field(..., alias="changePassword")
    sort: SortConfig
    etag: ETagConfig
    authentication_schemes: Optional[List[AuthenticationScheme]] = Field(None, alias="authenticationSchemes")
    meta: Optional[Meta] = None
