from datetime import datetime, timezone

from src.platform.constant.route_constant import DATE_TIME_FORMAT
from src.platform.exception.exceptions import ValidationError


def parse_date_time(value: str, *, name: str) -> datetime:
    """Parse a `%Y-%m-%dT%H:%M:%S` query value as UTC."""
    try:
        return datetime.strptime(value, DATE_TIME_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        raise ValidationError(f'Invalid {name}: expected format {DATE_TIME_FORMAT}')
