"""Notification Type Enum"""

from enum import StrEnum


class NotificationType(StrEnum):
    TICKET_CONFIRMATION = 'TICKET_CONFIRMATION'
    TICKET_CANCELLATION = 'TICKET_CANCELLATION'
    FLIGHT_SCHEDULE_CHANGE = 'FLIGHT_SCHEDULE_CHANGE'
    GENERAL = 'GENERAL'
