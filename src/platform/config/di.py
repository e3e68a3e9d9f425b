"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.flight_booking.app.observer.notification_generator import NotificationGenerator
from src.service.flight_booking.app.observer.ticket_subject import TicketSubject
from src.service.flight_booking.driven_adapter.document.reportlab_ticket_pdf_renderer import (
    ReportlabTicketPdfRenderer,
)
from src.service.flight_booking.driven_adapter.email.logging_email_sender import (
    LoggingEmailSender,
)
from src.service.flight_booking.driven_adapter.repo.flight_query_repo_impl import (
    FlightQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.notification_command_repo_impl import (
    NotificationCommandRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.notification_query_repo_impl import (
    NotificationQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.ticket_query_repo_impl import (
    TicketQueryRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from src.service.flight_booking.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.flight_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.flight_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (session provider for the session_factory repositories)
    database = providers.Singleton(Database)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth)

    # Repositories (stateless - use session_factory per call)
    # Flight and ticket writes go through the unit of work, see unit_of_work.py
    flight_query_repo = providers.Singleton(
        FlightQueryRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl,
        session_factory=database.provided.session,
        password_hasher=password_hasher,
    )
    notification_command_repo = providers.Singleton(
        NotificationCommandRepoImpl, session_factory=database.provided.session
    )
    notification_query_repo = providers.Singleton(
        NotificationQueryRepoImpl, session_factory=database.provided.session
    )

    # Outbound adapters
    email_sender = providers.Singleton(
        LoggingEmailSender,
        sender_address=config_service.provided.EMAIL_SENDER_ADDRESS,
        debug=config_service.provided.EMAIL_DEBUG,
    )
    pdf_renderer = providers.Singleton(ReportlabTicketPdfRenderer)

    # Ticket lifecycle fan-out
    ticket_subject = providers.Singleton(TicketSubject)
    notification_generator = providers.Singleton(
        NotificationGenerator,
        ticket_subject=ticket_subject,
        notification_command_repo=notification_command_repo,
        email_sender=email_sender,
    )


container = Container()


def setup() -> None:
    container.config_service()
    # Building the generator subscribes it to ticket_subject
    container.notification_generator()


def cleanup() -> None:
    container.reset_singletons()
