"""
Turns the --resource flag into a filter over resource table entries.

A resource is looked up either by numeric ID, written in decimal, hexadecimal
("0x7f0e013a", "#7f0e013a") or octal ("017"), or by name in the form
"<type>/<name>", e.g. "drawable/icon".
"""

import re
from dataclasses import dataclass

from bundle_inspect.config.constants import RESOURCE_NAME_EXAMPLE, RESOURCE_NAME_FORMAT
from bundle_inspect.utils.exceptions import InvalidCommandException

RESOURCE_NAME_PATTERN = re.compile(r"(?P<type>[^/]+)/(?P<name>[^/]+)")

_LONG_LITERAL = re.compile(
    r"(?P<sign>[-+]?)(?:(?:0[xX]|#)(?P<hex>[0-9a-fA-F]+)|0(?P<oct>[0-7]+)|(?P<dec>[1-9][0-9]*|0))"
)

LONG_MIN = -(2 ** 63)
LONG_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class ResourceTableEntry:
    typeName: str
    entryName: str
    resourceId: int


def toInt32(value):
    """Wrap ``value`` into the signed 32-bit range."""
    return ((value + 2 ** 31) % 2 ** 32) - 2 ** 31


def decodeLong(literal):
    """
    Decode a signed 64-bit integer literal, or return None if ``literal`` is
    not one.
    """
    match = _LONG_LITERAL.fullmatch(literal)
    if match is None:
        return None

    if match.group("hex") is not None:
        value = int(match.group("hex"), 16)
    elif match.group("oct") is not None:
        value = int(match.group("oct"), 8)
    else:
        value = int(match.group("dec"))
    if match.group("sign") == "-":
        value = -value

    if value < LONG_MIN or value > LONG_MAX:
        return None
    return value


def decodeResourceId(literal):
    """
    Decode a resource ID as a signed 32-bit integer, or return None if
    ``literal`` is not a number.

    Resource IDs with the high bit set are negative as 32-bit integers, so
    "0xffffffff" and "-1" decode to the same ID. Literals beyond 32 bits are
    truncated rather than rejected.
    """
    value = decodeLong(literal)
    if value is None:
        return None
    return toInt32(value)


def parseResourceFlag(resource):
    """Split a --resource value into a (resourceId, resourceName) pair."""
    if resource is None:
        return None, None
    resourceId = decodeResourceId(resource)
    if resourceId is not None:
        return resourceId, None
    return None, resource


def compileResourcePredicate(resourceId=None, resourceName=None):
    if resourceId is not None and resourceName is not None:
        raise InvalidCommandException("Cannot pass both resource ID and resource name. Pick one!")

    if resourceId is not None:
        wanted = toInt32(resourceId)
        return lambda entry: toInt32(entry.resourceId) == wanted

    if resourceName is not None:
        match = RESOURCE_NAME_PATTERN.fullmatch(resourceName)
        if match is None:
            raise InvalidCommandException(
                "Resource name must match the format '%s', e.g. '%s'.", RESOURCE_NAME_FORMAT, RESOURCE_NAME_EXAMPLE)
        typeName, entryName = match.group("type"), match.group("name")
        return lambda entry: entry.typeName == typeName and entry.entryName == entryName

    return lambda entry: True
