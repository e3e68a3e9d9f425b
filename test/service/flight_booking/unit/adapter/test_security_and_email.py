from pydantic import SecretStr
import pytest

from src.service.flight_booking.driven_adapter.email.logging_email_sender import (
    LoggingEmailSender,
)
from src.service.flight_booking.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


@pytest.mark.unit
class TestBcryptPasswordHasher:
    def test_hash_and_verify(self):
        hasher = BcryptPasswordHasher()

        hashed = hasher.hash_password(plain_password=SecretStr('P@ssw0rd!'))

        assert hashed != 'P@ssw0rd!'
        assert hasher.verify_password(plain_password=SecretStr('P@ssw0rd!'), hashed_password=hashed)
        assert not hasher.verify_password(plain_password=SecretStr('nope'), hashed_password=hashed)

    @pytest.mark.parametrize('hashed_password', ['', 'not-a-bcrypt-hash'])
    def test_unusable_hash_never_verifies(self, hashed_password):
        assert not BcryptPasswordHasher().verify_password(
            plain_password=SecretStr('P@ssw0rd!'), hashed_password=hashed_password
        )


@pytest.mark.unit
class TestLoggingEmailSender:
    @pytest.mark.asyncio
    async def test_send_records_the_message(self):
        sender = LoggingEmailSender(sender_address='noreply@flights.test', debug=False)

        sent = await sender.send_email(to='jane.doe@example.com', subject='Hi', body='Body')

        assert sent is True
        assert len(sender.sent_emails) == 1
        email = sender.sent_emails[0]
        assert email['from'] == 'noreply@flights.test'
        assert email['to'] == 'jane.doe@example.com'
        assert email['subject'] == 'Hi'

    @pytest.mark.asyncio
    async def test_history_keeps_only_the_most_recent_messages(self):
        """
        Given: A sender that keeps a history of 3 messages
        When: 500 notification emails go through it
        Then: Only the last 3 are retained
        """
        sender = LoggingEmailSender(
            sender_address='noreply@flights.test', debug=False, history_size=3
        )

        for i in range(500):
            await sender.send_email(to=f'passenger{i}@example.com', subject='Hi', body='Body')

        assert len(sender.sent_emails) == 3
        assert [email['to'] for email in sender.sent_emails] == [
            'passenger497@example.com',
            'passenger498@example.com',
            'passenger499@example.com',
        ]

    def test_default_history_is_bounded(self):
        sender = LoggingEmailSender(sender_address='noreply@flights.test')

        assert sender.sent_emails.maxlen == 100
