from typing import List, Optional
from pydantic import Field
from .base import (
    BaseResource,
    MultiValuedAttribute,
    Name,
    Address,
    Reference,
    SCIMModel,
)


class Email(MultiValuedAttribute):
    pass


class PhoneNumber(MultiValuedAttribute):
    pass


class Im(MultiValuedAttribute):
    pass


class Photo(MultiValuedAttribute):
    pass


class Entitlement(MultiValuedAttribute):
    pass


class Role(MultiValuedAttribute):
    pass


class X509Certificate(MultiValuedAttribute):
    pass


class UserGroup(Reference):
    """Represents a group membership for a user (read-only)"""


class Manager(SCIMModel):
    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display_name: Optional[str] = Field(None, alias="displayName")


class EnterpriseUser(SCIMModel):
    employee_number: Optional[str] = Field(None, alias="employeeNumber")
    cost_center: Optional[str] = Field(None, alias="costCenter")
    organization: Optional[str] = None
    division: Optional[str] = None
    department: Optional[str] = None
    manager: Optional[Manager] = None


class User(BaseResource):
    user_name: str = Field(..., alias="userName")
    name: Optional[Name] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    nick_name: Optional[str] = Field(None, alias="nickName")
    profile_url: Optional[str] = Field(None, alias="profileUrl")
    title: Optional[str] = None
    user_type: Optional[str] = Field(None, alias="userType")
    preferred_language: Optional[str] = Field(None, alias="preferredLanguage")
    locale: Optional[str] = None
    timezone: Optional[str] = None
    active: Optional[bool] = None
    password: Optional[str] = None

    emails: Optional[List[Email]] = None
    addresses: Optional[List[Address]] = None
    phone_numbers: Optional[List[PhoneNumber]] = Field(None, alias="phoneNumbers")
    ims: Optional[List[Im]] = None
    photos: Optional[List[Photo]] = None
    groups: Optional[List[UserGroup]] = None
    entitlements: Optional[List[Entitlement]] = None
    roles: Optional[List[Role]] = None
    x509_certificates: Optional[List[X509Certificate]] = Field(None, alias="x509Certificates")

    # Extension schema
    enterprise_user: Optional[EnterpriseUser] = Field(
        None,
        alias="urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"
    )
