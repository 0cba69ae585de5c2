"""Enumerations shared by ORM models and API schemas."""

from enum import Enum


class Theme(str, Enum):
    LIGHT = "LIGHT"
    DARK = "DARK"
    CUSTOM = "CUSTOM"


class DistributorAction(str, Enum):
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    TERMINATED = "TERMINATED"


class TermsStatus(str, Enum):
    DRAFT = "DRAFT"
    PENDING_SIGNATURE = "PENDING_SIGNATURE"
    SIGNED = "SIGNED"
    EXPIRED = "EXPIRED"
    TERMINATED = "TERMINATED"


class ShipmentStatus(str, Enum):
    PENDING = "PENDING"
    SHIPPED = "SHIPPED"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"
    RETURNED = "RETURNED"
    CANCELLED = "CANCELLED"


class ContractStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
