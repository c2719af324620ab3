"""
CMMS Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ActivityType,
    UserPermission,
    UserRole,
    UserStatus,
)

# Export all entities
from .activity_log import ActivityLog
from .credential import Credential
from .inventory_item import InventoryItem
from .invitation import Invitation
from .user import User

__all__ = [
    # Enums
    "ActivityType",
    "UserPermission",
    "UserRole",
    "UserStatus",
    # Entities
    "ActivityLog",
    "Credential",
    "InventoryItem",
    "Invitation",
    "User",
]
