from dateutil import parser as date_parser
from typing import Any, Dict, List

_REQUIRED_STRINGS = {
    'title': 'Title is required and must be a string',
    'description': 'Description is required and must be a string',
    'genre': 'Genre is required and must be a string',
    'platform': 'Platform is required and must be a string',
}


class ValidationError(Exception):
    """Raised when a create/update payload has one or more invalid fields."""

    def __init__(self, details: List[Dict[str, str]]):
        super().__init__('Invalid input data')
        self.details = details

    def to_dict(self):
        return {
            'error': 'VALIDATION_ERROR',
            'message': 'Invalid input data',
            'details': self.details,
            'code': 400,
        }


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ''


def _is_valid_rating(value: Any) -> bool:
    # bool is an int subclass but not a rating
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return 0 <= value <= 10


def is_valid_date(value: Any) -> bool:
    """Accept any string dateutil can read as a real calendar date."""
    if not _is_non_empty_string(value) or not value.strip():
        return False
    try:
        date_parser.parse(value)
    except (ValueError, OverflowError):
        return False
    return True


def validate_game_data(data: Any) -> List[Dict[str, str]]:
    """Check a game payload and return every violation found.

    Anything that is not a mapping is checked as if it were empty. Violations
    come back in field order as ``{'field': ..., 'message': ...}`` dicts; an
    empty list means the payload can be stored.
    """
    if not isinstance(data, dict):
        data = {}
    errors = []

    for field in ('title', 'description', 'genre', 'platform'):
        if not _is_non_empty_string(data.get(field)):
            errors.append({'field': field, 'message': _REQUIRED_STRINGS[field]})

    if not _is_valid_rating(data.get('rating')):
        errors.append({'field': 'rating', 'message': 'Rating must be a number between 0 and 10'})

    if not is_valid_date(data.get('releaseDate')):
        errors.append({'field': 'releaseDate', 'message': 'Release date must be a valid ISO 8601 date'})

    if not _is_non_empty_string(data.get('imageUrl')):
        errors.append({'field': 'imageUrl', 'message': 'Image URL is required and must be a string'})

    return errors


def ensure_valid_game_data(data: Any) -> Dict[str, Any]:
    """Return *data* unchanged if it is valid, otherwise raise :class:`ValidationError`."""
    errors = validate_game_data(data)
    if errors:
        raise ValidationError(errors)
    return data
