"""Decide which types a category documents."""

from typing import Iterable

from .models import TypeDescription, TypeKind


def is_type_included(
    type: TypeDescription,
    included_types: TypeKind,
    included_namespaces: Iterable[str],
    excluded_namespaces: Iterable[str] = (),
) -> bool:
    """Check a type against a set of kinds and namespace prefixes.

    The kind rules are applied first: hidden types are never included,
    and abstract, enum, behaviour and asset types each need their own flag.
    Anything that is none of enum, behaviour or asset counts as a plain class.

    ``excluded_namespaces`` is accepted so callers can pass a category's
    full namespace configuration, but only inclusion is tested here; use
    :func:`is_namespace_excluded` where exclusion applies.
    """
    include_abstract = bool(included_types & TypeKind.ABSTRACT)
    include_classes = bool(included_types & TypeKind.CLASS)
    include_enums = bool(included_types & TypeKind.ENUM)
    include_behaviours = bool(included_types & TypeKind.BEHAVIOUR)
    include_assets = bool(included_types & TypeKind.ASSET)

    if (not type.is_visible
            or (type.is_abstract and not include_abstract)
            or (type.is_enum and not include_enums)
            or (type.is_behaviour and not include_behaviours)
            or (type.is_asset and not include_assets)):
        return False

    if not include_classes and not type.is_behaviour and not type.is_asset and not type.is_enum:
        return False

    return is_namespace_included(type, included_namespaces)


def is_namespace_included(type: TypeDescription, namespaces: Iterable[str]) -> bool:
    """True when the type's namespace starts with any of ``namespaces``.

    The test is a plain string prefix, so ``Foo`` covers ``Foo.Bar`` and
    also ``FooBar``. Types without a namespace are never included.
    """
    if type.namespace is None:
        return False

    return any(type.namespace.startswith(namespace) for namespace in namespaces)


def is_namespace_excluded(type: TypeDescription, namespaces: Iterable[str]) -> bool:
    """True when the type's namespace starts with any excluded prefix."""
    return is_namespace_included(type, namespaces)
