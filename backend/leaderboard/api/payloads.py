from flask import request

from leaderboard.errors import ValidationError
from leaderboard.models import INT_MAX, INT_MIN


def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Could not decode JSON body')
    return data


def require_string(data, field, max_length=None):
    value = data.get(field)
    if not isinstance(value, str) or not value:
        raise ValidationError(f'{field} is required')
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f'{field} must be at most {max_length} characters')
    return value


def require_int(data, field, minimum=INT_MIN, maximum=INT_MAX):
    value = data.get(field)
    # bool is an int subclass, but true/false is not a score
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f'{field} must be an integer')
    if not minimum <= value <= maximum:
        raise ValidationError(f'{field} must be between {minimum} and {maximum}')
    return value
