import pytest

from src.platform.logging.loguru_io_config import MASK, MAX_CONTENT_LENGTH
from src.platform.logging.loguru_io_utils import (
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMaskSensitive:
    def test_password_in_repr_is_masked(self):
        masked = mask_sensitive("UserEntity(email='a@b.com', password='hunter2')")

        assert 'hunter2' not in masked
        assert f"password='{MASK}'" in masked
        assert "email='a@b.com'" in masked

    def test_token_in_dict_repr_is_masked(self):
        masked = mask_sensitive({'refresh_token': 'abc.def.ghi'})

        assert 'abc.def.ghi' not in masked

    def test_plain_data_is_returned_unchanged(self):
        data = {'flight_number': 'IB3170'}

        assert mask_sensitive(data) is data

    @pytest.mark.parametrize('keyword', ['password', 'new_password', 'current_password'])
    def test_sensitive_keyword(self, keyword):
        assert should_mask_keyword(keyword, 'secret') == MASK

    def test_regular_keyword(self):
        assert should_mask_keyword('seat_number', '12A') == '12A'


@pytest.mark.unit
class TestTruncateContent:
    def test_short_content_untouched(self):
        assert truncate_content('short') == 'short'

    def test_long_content_is_truncated(self):
        truncated = truncate_content('x' * (MAX_CONTENT_LENGTH + 10))

        assert truncated.endswith('(truncated 10 chars)')


@pytest.mark.unit
class TestNormalizeArgsKwargs:
    def test_drops_unknown_kwargs(self):
        def execute(*, ticket_id):
            return ticket_id

        _, kwargs = normalize_args_kwargs(execute, ticket_id=1, injected='x')

        assert kwargs == {'ticket_id': 1}
