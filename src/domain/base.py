from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns"""
    return datetime.now(UTC).replace(tzinfo=None)


class CamelModel(BaseModel):
    """Pydantic model exchanged over HTTP with camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthContext(CamelModel):
    """Identity carried by a verified session credential"""

    user_id: int
    email: str
