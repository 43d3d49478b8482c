from typing import List, Optional
from pydantic import Field
from .base import BaseResource, Reference


class GroupMember(Reference):
    pass


class Group(BaseResource):
    id: str
    display_name: str = Field(..., alias="displayName")
    members: Optional[List[GroupMember]] = None
