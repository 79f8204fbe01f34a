"""Sections group the members of a type in a rendered document."""

from fnmatch import fnmatchcase
from typing import List

from ..config import SectionSettings
from .models import MemberDescription, MemberKind, TypeDescription
from .names import get_id, get_nice_name


class DocumentationSection:
    """A configured section and the members it selects."""

    def __init__(self, settings: SectionSettings):
        self.settings = settings
        self.name = settings.name
        self.id = get_id(settings.name)
        self.nice_name = get_nice_name(settings.name)
        self.member_kinds = {MemberKind(kind) for kind in settings.member_kinds}

    def includes(self, member: MemberDescription) -> bool:
        if member.kind not in self.member_kinds:
            return False
        if member.is_static and not self.settings.include_static:
            return False
        if not member.is_static and not self.settings.include_instance:
            return False
        if self.settings.name_pattern and not fnmatchcase(member.name, self.settings.name_pattern):
            return False
        return True

    def select(self, type: TypeDescription) -> List[MemberDescription]:
        """Members of ``type`` covered by this section, in declaration order."""
        return [member for member in type.members if self.includes(member)]

    def __repr__(self) -> str:
        return f"DocumentationSection({self.name!r})"
