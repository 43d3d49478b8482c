from typing import Optional


class SCIMError(Exception):
    """Base class for every failure raised by the codec and validators."""

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(detail or "SCIM error")


class MissingRequiredField(SCIMError):
    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Missing required field: {field_name}")


class InvalidFieldValue(SCIMError):
    def __init__(self, field_name: str, detail: str):
        self.field_name = field_name
        self.reason = detail
        super().__init__(f"Invalid value for field {field_name}: {detail}")


class SerializationError(SCIMError):
    def __init__(self, inner: Exception):
        self.inner = inner
        super().__init__(f"Serialization error: {inner}")


class DeserializationError(SCIMError):
    def __init__(self, inner: Exception):
        self.inner = inner
        super().__init__(f"Deserialization error: {inner}")
