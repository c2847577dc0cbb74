from typing import NamedTuple

from .exceptions import ParseError


class ParsedIdentifier(NamedTuple):
    prefix: str
    display_name: str


def parse_identifier(identifier: str, stage: str = None) -> ParsedIdentifier:
    """
    Split an ARN such as arn:aws:ecs:eu-west-1:123456789012:cluster/my-cluster
    on its first "/". Task ARNs keep the cluster in the display name:
    task/my-cluster/0123 -> "my-cluster/0123".
    """
    prefix, separator, display_name = (identifier or "").partition("/")
    if not separator:
        raise ParseError(f"Unable to split '{identifier}' by /", stage=stage)
    return ParsedIdentifier(prefix, display_name)
