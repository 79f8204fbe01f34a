"""Placeholder substitution for documentation templates.

A template is plain text containing ``{Placeholder}`` tokens. Rendering
replaces every token that has a bound value and leaves the others alone.
There are no loops or conditionals: repeated elements are rendered one at a
time by the caller, joined with a separator, and bound to a single
placeholder of the enclosing template.
"""

import re
from typing import Callable, Dict, Iterable, Mapping, Optional, TypeVar

from .models import TypeDescription
from .names import get_clean_name, get_nice_name, get_type_id

PLACEHOLDER_PATTERN = re.compile(r'\{(\w+)\}')

# Category
CATEGORY_NAME_TAG = "CategoryName"
CATEGORY_NICE_NAME_TAG = "CategoryNiceName"
CATEGORY_ID_TAG = "CategoryId"
TYPES_TAG = "Types"
CATEGORIES_TAG = "Categories"

# Type
TYPE_NAME_TAG = "TypeName"
TYPE_RAW_NAME_TAG = "TypeRawName"
TYPE_NICE_NAME_TAG = "TypeNiceName"
TYPE_ID_TAG = "TypeId"
TYPE_NAMESPACE_TAG = "TypeNamespace"
TYPE_FILENAME_TAG = "TypeFilename"
GENERICS_TAG = "Generics"
BASES_TAG = "Bases"
SECTIONS_TAG = "Sections"

# Section
SECTION_NAME_TAG = "SectionName"
SECTION_NICE_NAME_TAG = "SectionNiceName"
SECTION_ID_TAG = "SectionId"
MEMBERS_TAG = "Members"

# Member, parameter and decorator
NAME_TAG = "Name"
NICE_NAME_TAG = "NiceName"
TYPE_TAG = "Type"
DECORATORS_TAG = "Decorators"
PARAMETERS_TAG = "Parameters"

T = TypeVar('T')


def render_template(template: str, values: Mapping[str, Optional[str]]) -> str:
    """Substitute bound placeholders in ``template``.

    A value of ``None`` renders as an empty string. Placeholders missing
    from ``values`` are kept verbatim, and substituted text is not scanned
    again for placeholders.

    Examples:
        >>> render_template("{Type} {Name}", {"Type": "int", "Name": "count"})
        'int count'
        >>> render_template("{Name}{Unknown}", {"Name": "x"})
        'x{Unknown}'
    """
    def substitute(match):
        name = match.group(1)
        if name not in values:
            return match.group(0)
        value = values[name]
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(substitute, template)


def join_rendered(items: Iterable[str], separator: str) -> str:
    """Join already rendered elements; an empty sequence gives ``""``."""
    return separator.join(items)


def render_each(items: Iterable[T], render: Callable[[T], str], separator: str) -> str:
    """Render every item and join the results with ``separator``."""
    return join_rendered((render(item) for item in items), separator)



def category_values(category) -> Dict[str, Optional[str]]:
    """Placeholder values describing a category, empty when there is none."""
    if category is None:
        return {
            CATEGORY_NAME_TAG: "",
            CATEGORY_NICE_NAME_TAG: "",
            CATEGORY_ID_TAG: "",
        }

    return {
        CATEGORY_NAME_TAG: category.name,
        CATEGORY_NICE_NAME_TAG: category.nice_name,
        CATEGORY_ID_TAG: category.id,
    }


def type_values(type: TypeDescription, aliases: Optional[Mapping[str, str]] = None) -> Dict[str, Optional[str]]:
    """Placeholder values describing a type."""
    clean_name = get_clean_name(type, aliases)

    return {
        TYPE_NAME_TAG: clean_name,
        TYPE_RAW_NAME_TAG: type.name,
        TYPE_NICE_NAME_TAG: get_nice_name(clean_name),
        TYPE_ID_TAG: get_type_id(type),
        TYPE_NAMESPACE_TAG: type.namespace or "",
    }
