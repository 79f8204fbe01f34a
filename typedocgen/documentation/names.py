"""Identifiers and display names derived from raw type and member names."""

from typing import Mapping, Optional

from ..constants import DEFAULT_TYPE_ALIASES
from .models import TypeDescription

# Raw generic type names carry the arity after this marker, e.g. "List`1".
GENERIC_MARKER = '`'
BY_REF_MARKER = '&'


def _require_name(name: str):
    if not name:
        raise ValueError("Cannot derive a name from an empty string")


def get_id(name: str) -> str:
    """Turn a raw name into a lower-case, dash separated identifier.

    Examples:
        >>> get_id("HelloWorld")
        'hello-world'
        >>> get_id("IList`1")
        'i-list-'
        >>> get_id("Int32[]")
        'int32'
    """
    _require_name(name)

    id = [name[0].lower()]
    skipping_arity = False

    for char in name[1:]:
        if skipping_arity:
            if char.isdigit():
                continue
            skipping_arity = False

        if char in '[]':
            continue

        if char == GENERIC_MARKER:
            id.append('-')
            skipping_arity = True
        elif char.isupper():
            id.append('-')
            id.append(char.lower())
        else:
            id.append(char.lower())

    return ''.join(id)


def get_type_id(type: TypeDescription) -> str:
    """Identifier of a type, prefixed by its enclosing types when nested."""
    id = get_id(type.name)

    if type.declaring_type is not None:
        id = get_type_id(type.declaring_type) + "-" + id

    return id


def get_nice_name(name: str) -> str:
    """Split a camel or Pascal cased name into space separated words.

    Examples:
        >>> get_nice_name("HelloWorld")
        'Hello World'
        >>> get_nice_name("ABTest")
        'A B Test'
    """
    _require_name(name)

    nice = [name[0]]
    space = True

    for char in name[1:]:
        if space and char.isupper():
            nice.append(' ')

        nice.append(char)
        space = char != ' ' and char != '<'

    return ''.join(nice)


def get_clean_name(type: TypeDescription, aliases: Optional[Mapping[str, str]] = None) -> str:
    """Display name of a type without arity suffix or by-ref marker."""
    aliases = DEFAULT_TYPE_ALIASES if aliases is None else aliases

    name = type.name
    index = name.find(GENERIC_MARKER)
    if index >= 0:
        name = name[:index]

    name = name.rstrip(BY_REF_MARKER)

    return aliases.get(name, name)
