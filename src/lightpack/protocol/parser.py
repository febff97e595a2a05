"""
Positional parsing of Lightpack API replies.

Replies have one of two shapes, optionally followed by ``\\r\\n``::

    key:value
    key:value;value;...;

Parsing is strictly positional: split on a delimiter and take a fixed
field. There is no schema. When a reply is too short for the field being
read (for example because it was truncated by the single bounded read in
``LightpackClient.exchange``) a MalformedResponseError is raised instead
of an IndexError.

Splitting drops trailing empty fields, so ``"getprofile:"`` has no value
field and ``"A;B;;"`` splits to ``["A", "B"]``.
"""

from lightpack.exceptions import MalformedResponseError, ResponseFormatError

FIELD_SEPARATOR = ":"
LIST_SEPARATOR = ";"
PROFILES_TERMINATOR = ";\r\n"

LOCK_SUCCESS = "lock:success"
UNLOCK_SUCCESS = "unlock:success"
UNLOCK_NOT_LOCKED = "unlock:not locked"


def split_fields(text: str, separator: str) -> list[str]:
    """
    Split ``text`` on ``separator`` and drop trailing empty fields.

    Text without the separator is returned as a single field, even when
    empty.
    """
    if separator not in text:
        return [text]
    fields = text.split(separator)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def parse_field(response: str, command: str) -> str:
    """
    Return the value part of a ``key:value`` reply, untrimmed.

    Args:
        response: Raw reply text
        command: Command that produced the reply (for error messages)

    Raises:
        MalformedResponseError: If the reply has no value field
    """
    fields = split_fields(response, FIELD_SEPARATOR)
    if len(fields) < 2:
        raise MalformedResponseError(command.strip(), response)
    return fields[1]


def parse_int_field(response: str, command: str) -> int:
    """
    Return the value part of a ``key:value`` reply as an integer.

    Raises:
        MalformedResponseError: If the reply has no value field
        ResponseFormatError: If the value is not an integer
    """
    field = parse_field(response, command)
    try:
        return int(field.strip())
    except ValueError as e:
        raise ResponseFormatError(command.strip(), response, field) from e


def parse_profiles(response: str, command: str = "getprofiles") -> list[str]:
    """
    Parse a ``getprofiles:A;B;C;`` reply into profile names.

    Example:
        >>> parse_profiles("getprofiles:Profile1;Profile2;Profile3;;\\r\\n")
        ['Profile1', 'Profile2', 'Profile3']
    """
    cleaned = response.replace(PROFILES_TERMINATOR, "")
    return split_fields(parse_field(cleaned, command), LIST_SEPARATOR)


def is_lock_success(response: str) -> bool:
    """True if the reply to ``lock`` reports that the lock was granted."""
    return LOCK_SUCCESS in response


def is_unlock_success(response: str) -> bool:
    """True if the reply to ``unlock`` reports the lock is no longer held."""
    return UNLOCK_SUCCESS in response or UNLOCK_NOT_LOCKED in response
