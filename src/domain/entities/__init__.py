"""
Auth Service Domain Entities

Each entity in its own file.
"""

from .user import User
from .session import Session
from .audit_event import AuditEvent

__all__ = [
    "User",
    "Session",
    "AuditEvent",
]
