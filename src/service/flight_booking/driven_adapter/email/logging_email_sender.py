"""Mock email sender: writes the message to the log instead of an SMTP server."""

from collections import deque
from datetime import datetime, timezone
from typing import Deque

from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.interface.i_email_sender import IEmailSender


class LoggingEmailSender(IEmailSender):
    def __init__(self, *, sender_address: str, debug: bool = True, history_size: int = 100):
        self.sender_address = sender_address
        self.debug = debug
        # Most recent messages only; older ones fall off
        self.sent_emails: Deque[dict] = deque(maxlen=history_size)

    @Logger.io
    async def send_email(self, *, to: str, subject: str, body: str) -> bool:
        email_data = {
            'from': self.sender_address,
            'to': to,
            'subject': subject,
            'body': body,
            'sent_at': datetime.now(timezone.utc),
        }
        self.sent_emails.append(email_data)

        if self.debug:
            Logger.base.info(
                f'📧 [EMAIL] {self.sender_address} -> {to} | {subject}\n'
                f'{"-" * 50}\n{body}\n{"-" * 50}'
            )
        else:
            Logger.base.info(f'📧 [EMAIL] {self.sender_address} -> {to} | {subject}')

        return True
