"""Parsing and formatting of compact reference strings.

Grammar::

    [access_point:]location[::object_expression]

Examples:
    >>> parse_reference("localhost:/a/b.txt::master")
    Reference(access_point='localhost', location='/a/b.txt', object_expression='master')
    >>> parse_reference("/a/b.txt")
    Reference(access_point='localhost', location='/a/b.txt', object_expression='')
"""

from __future__ import annotations

from git_link.core.errors import FormatError
from git_link.core.models import LOCALHOST, Reference

OBJECT_DELIMITER = "::"
ACCESS_DELIMITER = ":"


def parse_reference(raw: str) -> Reference:
    """Split a raw reference string into its three fields.

    Raises:
        FormatError: If the object delimiter appears more than once
    """
    count = raw.count(OBJECT_DELIMITER)
    if count > 1:
        raise FormatError(
            f"Reference {raw!r} contains {OBJECT_DELIMITER!r} {count} times, expected at most once"
        )

    head, _, object_expression = raw.partition(OBJECT_DELIMITER)

    if ACCESS_DELIMITER in head:
        access_point, _, location = head.partition(ACCESS_DELIMITER)
    else:
        access_point, location = LOCALHOST, head

    return Reference(
        access_point=access_point,
        location=location,
        object_expression=object_expression,
    )


def format_reference(reference: Reference) -> str:
    """Render a reference back to its compact form."""
    text = f"{reference.access_point}{ACCESS_DELIMITER}{reference.location}"
    if reference.object_expression:
        text += f"{OBJECT_DELIMITER}{reference.object_expression}"
    return text
