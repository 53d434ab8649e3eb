import re

from core.errors import InvalidArgument

ENTITY_ID_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")


def is_entity_id(value) -> bool:
    """True when value is a shard.realm.num identifier such as 0.0.1234."""
    return isinstance(value, str) and ENTITY_ID_PATTERN.fullmatch(value) is not None


def validate_input(source: str, token: str, treasuries) -> None:
    if not source:
        raise InvalidArgument("Source (mirror node) must be defined.")
    if not is_entity_id(token):
        raise InvalidArgument(f"Invalid token ID {token}")
    if treasuries is None:
        return
    if not isinstance(treasuries, (list, tuple)):
        raise InvalidArgument("If defined, the treasuries argument must be a list.")
    for treasury in treasuries:
        if not is_entity_id(treasury):
            raise InvalidArgument(f"Invalid treasury ID {treasury}")
