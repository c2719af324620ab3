"""
CMMS Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Coarse role of a user account"""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    TECHNICIAN = "TECHNICIAN"
    CLIENT = "CLIENT"
    CONTRACTOR = "CONTRACTOR"


class UserPermission(str, Enum):
    """Capability grants, independent of role"""

    MANAGE_TEAM = "MANAGE_TEAM"
    VIEW_ANALYTICS = "VIEW_ANALYTICS"
    MANAGE_WORK_ORDERS = "MANAGE_WORK_ORDERS"
    MANAGE_ASSETS = "MANAGE_ASSETS"
    MANAGE_INVENTORY = "MANAGE_INVENTORY"
    SEND_MESSAGES = "SEND_MESSAGES"


class UserStatus(str, Enum):
    """User account status"""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"


class ActivityType(str, Enum):
    """Category of an activity log entry"""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LOGIN = "LOGIN"
    SYSTEM = "SYSTEM"
