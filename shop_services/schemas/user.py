"""
Pydantic models for user data.

The same model is used for request bodies, stored records and
responses.  Every field has a zero-value default so that a partial
body decodes; contents are not validated beyond their JSON types.
Fields are strict: a JSON string is never coerced into an ``id`` and
a number or boolean is never coerced into text.  The ``id`` sent by a
client is ignored on creation.
"""

from pydantic import BaseModel, Field, StrictInt, StrictStr


class User(BaseModel):
    """A registered user."""

    id: StrictInt = Field(0, examples=[1])
    name: StrictStr = Field("", examples=["Самыл Самылыч"])
    email: StrictStr = Field("", examples=["player@example.com"])


# Fixture users loaded into a fresh user store.
SEED_USERS = (
    User(id=1, name="Самыл Самылыч", email="player@example.com"),
    User(id=2, name="Михаил Шаманя", email="mishutka@example.com"),
)
