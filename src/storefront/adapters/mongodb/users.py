"""MongoDB adapter – users collection (client-issued string ids)."""

from __future__ import annotations

from datetime import datetime, time
from typing import Any

from storefront.adapters.mongodb.repository import MongoRepository
from storefront.domain import User, UserRepository, UserRole


class MongoUserRepository(MongoRepository[User], UserRepository):
    object_ids = False

    def _to_document(self, u: User) -> dict[str, Any]:
        return {
            "_id": u.id,
            "name": u.name,
            "email": u.email,
            "photo": u.photo,
            "gender": u.gender,
            "role": u.role.value,
            # BSON has no date-only type
            "dob": datetime.combine(u.dob, time.min),
            "createdAt": u.created_at,
        }

    def _from_document(self, doc: dict[str, Any]) -> User:
        return User(
            id=doc["_id"],
            name=doc["name"],
            email=doc["email"],
            photo=doc["photo"],
            gender=doc["gender"],
            role=UserRole(doc.get("role", UserRole.USER.value)),
            dob=doc["dob"].date(),
            created_at=doc["createdAt"],
        )


__all__ = ["MongoUserRepository"]
