from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict
from enum import Enum


class SCIMSchemaUri(str, Enum):
    USER = "urn:ietf:params:scim:schemas:core:2.0:User"
    GROUP = "urn:ietf:params:scim:schemas:core:2.0:Group"
    ENTERPRISE_USER = "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"
    RESOURCE_TYPE = "urn:ietf:params:scim:schemas:core:2.0:ResourceType"
    SERVICE_PROVIDER_CONFIG = "urn:ietf:params:scim:schemas:core:2.0:ServiceProviderConfig"


class SCIMModel(BaseModel):
    """Common configuration for every wire record.

    Fields are bound to their SCIM attribute names through aliases; Python code
    may construct models with either name. Unknown attributes are dropped.
    """
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True, extra="ignore")


class Meta(SCIMModel):
    resource_type: str = Field(..., alias="resourceType")
    created: str
    last_modified: str = Field(..., alias="lastModified")
    version: str
    location: str


class MultiValuedAttribute(SCIMModel):
    value: Optional[str] = None
    display: Optional[str] = None
    type: Optional[str] = None
    primary: Optional[bool] = None


class Reference(SCIMModel):
    """Pointer to another resource, used for group memberships and members."""
    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display: Optional[str] = None
    type: Optional[str] = None


class Name(SCIMModel):
    formatted: Optional[str] = None
    family_name: Optional[str] = Field(None, alias="familyName")
    given_name: Optional[str] = Field(None, alias="givenName")
    middle_name: Optional[str] = Field(None, alias="middleName")
    honorific_prefix: Optional[str] = Field(None, alias="honorificPrefix")
    honorific_suffix: Optional[str] = Field(None, alias="honorificSuffix")


class Address(SCIMModel):
    formatted: Optional[str] = None
    street_address: Optional[str] = Field(None, alias="streetAddress")
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = Field(None, alias="postalCode")
    country: Optional[str] = None
    type: Optional[str] = None
    primary: Optional[bool] = None


class BaseResource(SCIMModel):
    schemas: List[str]
    id: Optional[str] = None
    external_id: Optional[str] = Field(None, alias="externalId")
    meta: Optional[Meta] = None
