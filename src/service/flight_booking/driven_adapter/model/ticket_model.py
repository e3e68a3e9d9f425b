from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.service.flight_booking.domain.enum.ticket_status import TicketStatus
from src.service.flight_booking.driven_adapter.model.flight_model import FlightModel


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_number: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    flight_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('flight.id', ondelete='CASCADE'), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('user.id', ondelete='RESTRICT'), nullable=False, index=True
    )
    passenger_name: Mapped[str] = mapped_column(String(255), nullable=False)
    passenger_email: Mapped[str] = mapped_column(String(255), nullable=False)
    seat_number: Mapped[str] = mapped_column(String(10), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    purchase_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(
        String(20), default=TicketStatus.RESERVED, nullable=False, index=True
    )

    flight: Mapped[FlightModel] = relationship(back_populates='tickets', lazy='selectin')
