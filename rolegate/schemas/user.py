# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""
import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from rolegate.models.enums import UserType


class UserSchema(BaseModel):
    """Schema representing a user and their directly assigned roles."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    display_name: str
    type: UserType
    is_active: bool
    role_ids: list[uuid.UUID]

    @field_validator("role_ids", mode="before")
    @classmethod
    def sort_role_ids(cls, v: Any) -> list[uuid.UUID]:
        return sorted(v or [], key=str)


class UserTypeUpdateSchema(BaseModel):
    """Schema for changing a user's account type."""

    type: UserType
