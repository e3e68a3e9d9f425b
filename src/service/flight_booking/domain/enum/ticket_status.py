"""Ticket Status Enum"""

from enum import StrEnum


class TicketStatus(StrEnum):
    RESERVED = 'RESERVED'
    CONFIRMED = 'CONFIRMED'
    CANCELLED = 'CANCELLED'
