"""
Ticket Lifecycle Event Enum

UPDATED is an event only; it never appears as a ticket status.
"""

from enum import StrEnum


class TicketEventType(StrEnum):
    CREATED = 'CREATED'
    CONFIRMED = 'CONFIRMED'
    CANCELLED = 'CANCELLED'
    UPDATED = 'UPDATED'
