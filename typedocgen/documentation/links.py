"""Resolve references to other types into rendered links."""

from .classifier import is_namespace_excluded, is_namespace_included
from .models import TypeDescription
from .names import GENERIC_MARKER
from .templates import (
    NAME_TAG,
    TYPE_FILENAME_TAG,
    category_values,
    render_template,
    type_values,
)

ARRAY_SUFFIX = "[]"


class LinkResolver:
    """Render type references as seen from one category.

    A referenced type links into the category itself when its namespace is
    documented there, to an external namespace when one of the category's
    external entries covers it, and to the unknown link template otherwise.
    """

    def __init__(self, category):
        self.category = category

    @property
    def templates(self):
        return self.category.settings.templates

    def get_link(self, type: TypeDescription) -> str:
        """Render a reference to ``type`` including array and generic parts."""
        if type.is_array:
            return self.get_link(type.element_type) + ARRAY_SUFFIX

        if type.is_generic_parameter:
            return type.name

        link = self.get_type_link(type)

        if type.is_generic_type:
            link += self.get_generics(type)

        return link

    def get_type_link(self, type: TypeDescription) -> str:
        """Render the link for ``type`` itself, without generic arguments."""
        settings = self.category.settings

        if (is_namespace_included(type, settings.included_namespaces)
                and not is_namespace_excluded(type, settings.excluded_namespaces)):
            return self._render_link(type, self.category, self.templates.internal_link)

        for external in settings.external_namespaces:
            if is_namespace_included(type, [external.namespace]):
                return self._render_link(type, None, external.link_template)

        return self._render_link(type, None, self.templates.unknown_link)

    def get_generics(self, type: TypeDescription) -> str:
        """Render the generic argument list of ``type``.

        Constructed types link each argument; open definitions render each
        parameter name through the ``generic`` template.
        """
        templates = self.templates

        if type.is_constructed:
            generics = [self.get_link(argument) for argument in type.generic_arguments]
        else:
            names = type.generic_parameters or tuple(argument.name for argument in type.generic_arguments)
            generics = [render_template(templates.generic, {NAME_TAG: name}) for name in names]

        if not generics:
            return ""

        return templates.generic_opener + templates.generic_separator.join(generics) + templates.generic_closer

    def _render_link(self, type: TypeDescription, category, template: str) -> str:
        values = category_values(category)
        values.update(type_values(type, self.category.settings.type_aliases))

        if category is not None:
            values[TYPE_FILENAME_TAG] = category.get_type_filename(type)

        # external documentation often encodes generic arity with a dash
        return render_template(template, values).replace(GENERIC_MARKER, '-')
