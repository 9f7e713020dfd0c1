import math
from numbers import Number

from arcade.errors import InvalidId, ValidationError
from arcade.models import is_valid_key


def is_present(value) -> bool:
    return value is not None and not (isinstance(value, str) and not value.strip())


def require(fields: dict, names, message: str) -> None:
    if not all(is_present(fields.get(name)) for name in names):
        raise ValidationError(message)


def check_key(key, message=None) -> str:
    if not is_valid_key(key):
        raise InvalidId(message)
    return key


def to_number(value, field: str, minimum=None, exclusive=False, integer=False):
    """Coerce a JSON value (or numeric string) to a number within bounds."""
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a number')
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise ValidationError(f'{field} must be a number') from None
    if not isinstance(value, Number) or not math.isfinite(value):
        raise ValidationError(f'{field} must be a number')
    if integer:
        if value != int(value):
            raise ValidationError(f'{field} must be a whole number')
        value = int(value)
    if minimum is not None:
        if (exclusive and value <= minimum) or (not exclusive and value < minimum):
            bound = 'greater than' if exclusive else 'at least'
            raise ValidationError(f'{field} must be {bound} {minimum}')
    return value


def patch_fields(model, payload: dict, coercers: dict) -> dict:
    """Map a camelCase merge-patch payload onto column values.

    Unknown keys are ignored; known keys are coerced with ``coercers`` when
    one is registered for them.
    """
    fields = {}
    for wire_name, column in model.UPDATABLE.items():
        if wire_name not in payload:
            continue
        value = payload[wire_name]
        if not is_present(value) and not model.__table__.c[column].nullable:
            raise ValidationError(f'{wire_name} cannot be empty')
        coerce = coercers.get(wire_name)
        fields[column] = coerce(value) if coerce and value is not None else value
    return fields
