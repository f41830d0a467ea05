"""
User record. Immutable once created; email uniqueness is not enforced.
"""

from pydantic import BaseModel


class User(BaseModel):
    id: str
    name: str
    email: str

    model_config = {"frozen": True}

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
