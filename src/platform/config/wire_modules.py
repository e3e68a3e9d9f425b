"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.flight_booking.app.command import (
    cancel_ticket_use_case,
    confirm_ticket_use_case,
    create_ticket_use_case,
    mark_notification_seen_use_case,
    update_ticket_use_case,
    user_command_use_case,
)
from src.service.flight_booking.app.query import (
    flight_query_use_case,
    notification_query_use_case,
    render_ticket_pdf_use_case,
    ticket_query_use_case,
    user_query_use_case,
)
from src.service.flight_booking.driving_adapter.http_controller import auth_controller
from src.service.flight_booking.driving_adapter.http_controller.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    create_ticket_use_case,
    confirm_ticket_use_case,
    cancel_ticket_use_case,
    update_ticket_use_case,
    user_command_use_case,
    mark_notification_seen_use_case,
    flight_query_use_case,
    ticket_query_use_case,
    render_ticket_pdf_use_case,
    user_query_use_case,
    notification_query_use_case,
    auth_controller,
    role_auth,
]
