from abc import ABC, abstractmethod


class IEmailSender(ABC):
    @abstractmethod
    async def send_email(self, *, to: str, subject: str, body: str) -> bool:
        """Attempt delivery; returns False or raises when the message could not be sent"""
        pass
