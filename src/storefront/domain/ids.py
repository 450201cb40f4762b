"""Identifier helpers for store-assigned ids."""

from __future__ import annotations

from bson import ObjectId


def new_object_id() -> str:
    """Return a fresh MongoDB ObjectId as a 24-char hex string."""
    return str(ObjectId())


def is_object_id(value: str) -> bool:
    return ObjectId.is_valid(value)


__all__ = ["is_object_id", "new_object_id"]
