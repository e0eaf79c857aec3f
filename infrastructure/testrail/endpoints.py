"""
TestRail endpoint addressing.

Addresses are relative to the instance's API entry point, e.g.
``/api/v2/get_case/42`` or ``/api/v2/get_cases/1&suite_id=3``.
"""
from typing import Optional

from core.domain.enums import CommandAction, CommandType

API_PREFIX = "/api/v2/"


def build_address(
    command_type: CommandType,
    action: CommandAction,
    id1: Optional[int] = None,
    id2: Optional[int] = None,
    options: Optional[str] = None,
    id2_text: Optional[str] = None
) -> str:
    """Build the relative address for a command.

    Args:
        command_type: Operation kind (get, add, update, close, delete)
        action: Resource the command acts on
        id1: First path identifier
        id2: Second path identifier; takes precedence over id2_text
        options: Query options appended verbatim, e.g. "&suite_id=3"
        id2_text: Second identifier given as text (plan entry ids)

    Returns:
        Address such as "/api/v2/get_case/42"
    """
    address = f"{API_PREFIX}{command_type.value}_{action.value}"

    if id1 is not None:
        address += f"/{id1}"

    if id2 is not None:
        address += f"/{id2}"
    elif id2_text and id2_text.strip():
        address += f"/{id2_text}"

    if options and options.strip():
        address += options

    return address
