from .exceptions import Invalid


def to_unique_by_id(items):
    """Drop repeated ids, keeping the first occurrence and the input order"""
    seen = set()
    unique = []
    for item in items or []:
        item_id = item.get('id')
        if item_id is not None:
            if item_id in seen:
                continue
            seen.add(item_id)
        unique.append(item)
    return unique


def is_blank(value):
    return isinstance(value, str) and not value.strip()


def blank_to_none(value):
    return None if is_blank(value) else value


def strip_blank_keys(payload, fields):
    """
    Remove optional foreign keys holding an empty string so the backend
    sees "absent" instead of an invalid id. Explicit None is kept.
    """
    return {
        key: value for key, value in payload.items()
        if not (key in fields and is_blank(value))
    }


def require(value, name):
    """Reject a request locally when a mandatory scope parameter is missing"""
    if value is None or is_blank(value):
        raise Invalid(f'{name} is required')
    return value
