import uuid


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value: str) -> bool:
    """True for the 32-char hex ids handed out by `new_id`."""
    if len(value) != 32:
        return False
    try:
        uuid.UUID(hex=value)
    except ValueError:
        return False
    return True
