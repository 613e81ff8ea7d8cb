# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserType(str, Enum):
    """Account type enumeration.

    Administrators bypass every permission check and delegation bound.
    """

    ADMIN = "admin"
    STAFF = "staff"
    CLIENT = "client"
