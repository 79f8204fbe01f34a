"""Render type documents through the nested template hierarchy.

Each level renders its children, joins them with the configured separator
and binds the result to one placeholder of its own template::

    decorators -> parameters -> members -> sections -> type file
"""

from typing import Dict, Optional, Sequence

from .links import LinkResolver
from .models import MemberDescription, MemberKind, ParameterDescription, TypeDescription
from .sections import DocumentationSection
from .templates import (
    BASES_TAG,
    DECORATORS_TAG,
    GENERICS_TAG,
    MEMBERS_TAG,
    NAME_TAG,
    NICE_NAME_TAG,
    PARAMETERS_TAG,
    SECTION_ID_TAG,
    SECTION_NAME_TAG,
    SECTION_NICE_NAME_TAG,
    SECTIONS_TAG,
    TYPE_FILENAME_TAG,
    TYPE_TAG,
    category_values,
    join_rendered,
    render_each,
    render_template,
    type_values,
)


class TypeRenderer:
    """Render the index entry and document of types in one category."""

    def __init__(self, category, links: Optional[LinkResolver] = None):
        self.category = category
        self.links = links or LinkResolver(category)

    @property
    def templates(self):
        return self.category.settings.templates

    def type_context(self, type: TypeDescription) -> Dict[str, Optional[str]]:
        """Category and type placeholders shared by every template of a type."""
        values = category_values(self.category)
        values.update(type_values(type, self.category.settings.type_aliases))
        values[TYPE_FILENAME_TAG] = self.category.get_type_filename(type)
        return values

    def render_index_entry(self, type: TypeDescription) -> str:
        return render_template(self.templates.type, self.type_context(type))

    def render_file(self, type: TypeDescription) -> str:
        values = self.type_context(type)
        values[GENERICS_TAG] = self.links.get_generics(type) if type.is_generic_type else ""
        values[BASES_TAG] = self.render_bases(type)
        values[SECTIONS_TAG] = self.render_sections(type)
        return render_template(self.templates.type_file, values)

    def render_bases(self, type: TypeDescription) -> str:
        if not type.bases:
            return ""

        return self.templates.base_opener + render_each(
            type.bases, self.links.get_link, self.templates.base_separator
        )

    def render_sections(self, type: TypeDescription) -> str:
        rendered = []

        for section in self.category.sections:
            members = section.select(type)
            if members or section.settings.include_empty:
                rendered.append(self.render_section(section, type, members))

        return join_rendered(rendered, self.templates.section_separator)

    def render_section(
        self,
        section: DocumentationSection,
        type: TypeDescription,
        members: Sequence[MemberDescription],
    ) -> str:
        values = self.type_context(type)
        values[SECTION_NAME_TAG] = section.name
        values[SECTION_NICE_NAME_TAG] = section.nice_name
        values[SECTION_ID_TAG] = section.id
        values[MEMBERS_TAG] = render_each(members, self.render_member, self.templates.member_separator)
        return render_template(self.templates.section, values)

    def render_member(self, member: MemberDescription) -> str:
        templates = self.templates
        template = {
            MemberKind.CONSTRUCTOR: templates.constructor,
            MemberKind.FIELD: templates.field,
            MemberKind.PROPERTY: templates.property,
            MemberKind.METHOD: templates.method,
        }[member.kind]

        return render_template(template, {
            NAME_TAG: member.name,
            NICE_NAME_TAG: member.nice_name,
            TYPE_TAG: self.render_type(member.type),
            DECORATORS_TAG: self.render_decorators(member.decorators),
            PARAMETERS_TAG: self.render_parameters(member.parameters),
            GENERICS_TAG: self.render_member_generics(member),
        })

    def render_parameters(self, parameters: Sequence[ParameterDescription]) -> str:
        return render_each(parameters, self.render_parameter, self.templates.parameter_separator)

    def render_parameter(self, parameter: ParameterDescription) -> str:
        return render_template(self.templates.parameter, {
            NAME_TAG: parameter.name,
            NICE_NAME_TAG: parameter.nice_name,
            TYPE_TAG: self.render_type(parameter.type),
            DECORATORS_TAG: self.render_decorators(parameter.decorators),
        })

    def render_decorators(self, decorators: Sequence[str]) -> str:
        return render_each(
            decorators,
            lambda decorator: render_template(self.templates.decorator, {NAME_TAG: decorator}),
            self.templates.decorator_separator,
        )

    def render_member_generics(self, member: MemberDescription) -> str:
        if not member.generic_parameters:
            return ""

        templates = self.templates
        return templates.generic_opener + render_each(
            member.generic_parameters,
            lambda name: render_template(templates.generic, {NAME_TAG: name}),
            templates.generic_separator,
        ) + templates.generic_closer

    def render_type(self, type: Optional[TypeDescription]) -> str:
        return "" if type is None else self.links.get_link(type)
