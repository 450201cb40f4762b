"""User entity and repository port."""

from __future__ import annotations

import dataclasses
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any

from storefront.kernel.ddd import Repository
from storefront.kernel.errors import ValidationError


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


@dataclasses.dataclass
class User:
    """A shopper or admin. The id is issued by the identity provider."""

    id: str
    name: str
    email: str
    photo: str
    gender: str
    dob: date
    role: UserRole = UserRole.USER
    created_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def age(self, today: date | None = None) -> int:
        today = today or date.today()
        years = today.year - self.dob.year
        if (today.month, today.day) < (self.dob.month, self.dob.day):
            years -= 1
        return years

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "photo": self.photo,
            "gender": self.gender,
            "role": self.role.value,
            "dob": self.dob.isoformat(),
            "age": self.age(),
            "created_at": self.created_at.isoformat(),
        }


@dataclasses.dataclass(frozen=True)
class NewUser:
    id: str | None = None
    name: str | None = None
    email: str | None = None
    photo: str | None = None
    gender: str | None = None
    dob: date | None = None

    def build(self) -> User:
        missing = [
            f.name
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is None or getattr(self, f.name) == ""
        ]
        if missing:
            raise ValidationError("Please add all fields", fields=missing)
        return User(
            id=self.id,  # type: ignore[arg-type]
            name=self.name,  # type: ignore[arg-type]
            email=self.email,  # type: ignore[arg-type]
            photo=self.photo,  # type: ignore[arg-type]
            gender=self.gender,  # type: ignore[arg-type]
            dob=self.dob,  # type: ignore[arg-type]
        )


class UserRepository(Repository[User]):
    resource = "User"


__all__ = ["NewUser", "User", "UserRepository", "UserRole"]
