"""
Configuration management for typedocgen.
"""

import copy
import os
import yaml
import toml
import json
from pathlib import Path
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field, field_validator

from .constants import CONFIG_FILES, DEFAULT_CONFIG, DEFAULT_PROCESSOR_TEMPLATE, DEFAULT_TYPE_ALIASES
from .utils import logger, merge_dicts


class TemplateSet(BaseModel):
    """Templates and separators used when rendering a category."""
    category_file: str = Field(default="{CategoryNiceName} ({CategoryId})\n\n{Types}\n")
    type: str = Field(default="{TypeName}: {TypeFilename}")
    type_separator: str = Field(default="\n")

    type_file: str = Field(
        default="{CategoryNiceName} / {TypeNiceName} ({TypeId})\n\n"
                "{TypeNamespace}.{TypeName}{Generics}{Bases}\n\n{Sections}\n"
    )

    generic: str = Field(default="{Name}")
    generic_opener: str = Field(default="<")
    generic_closer: str = Field(default=">")
    generic_separator: str = Field(default=", ")

    base_opener: str = Field(default=" : ")
    base_separator: str = Field(default=", ")

    section: str = Field(default="{SectionNiceName}\n\n{Members}")
    section_separator: str = Field(default="\n\n")

    constructor: str = Field(default="{Name}({Parameters})")
    field: str = Field(default="{Decorators}{Type} {Name}")
    property: str = Field(default="{Decorators}{Type} {Name}")
    method: str = Field(default="{Decorators}{Type} {Name}{Generics}({Parameters})")
    member_separator: str = Field(default="\n")

    parameter: str = Field(default="{Decorators}{Type} {Name}")
    parameter_separator: str = Field(default=", ")

    decorator: str = Field(default="{Name} ")
    decorator_separator: str = Field(default="")

    internal_link: str = Field(default="{TypeName}")
    unknown_link: str = Field(default="{TypeName}")


class ExternalNamespace(BaseModel):
    """Link template for types living in a namespace documented elsewhere."""
    namespace: str
    link_template: str = Field(default="{TypeName}")


class SectionSettings(BaseModel):
    """A named group of members and the rule selecting them."""
    name: str
    member_kinds: List[str] = Field(default_factory=lambda: ["constructor", "field", "property", "method"])
    include_static: bool = Field(default=True)
    include_instance: bool = Field(default=True)
    name_pattern: Optional[str] = None
    include_empty: bool = Field(default=False)

    @field_validator("member_kinds")
    @classmethod
    def _check_member_kinds(cls, value: List[str]) -> List[str]:
        from .documentation.models import MemberKind
        for kind in value:
            MemberKind(kind.lower())
        return [kind.lower() for kind in value]


def default_sections() -> List[SectionSettings]:
    """Sections used when a category does not configure its own."""
    return [
        SectionSettings(name="Constructors", member_kinds=["constructor"]),
        SectionSettings(name="Fields", member_kinds=["field"]),
        SectionSettings(name="Properties", member_kinds=["property"]),
        SectionSettings(name="Methods", member_kinds=["method"]),
    ]


def default_type_aliases() -> Dict[str, str]:
    """Built-in raw type names and the short form they are displayed with."""
    return dict(DEFAULT_TYPE_ALIASES)


class CategorySettings(BaseModel):
    """Persisted configuration of one documentation category."""
    name: str = Field(default="")
    category_filename: str = Field(default="Generated/{CategoryId}.txt")
    type_filename: str = Field(default="Generated/{CategoryId}/{TypeId}.txt")
    include_in_table_of_contents: bool = Field(default=True)
    included_types: List[str] = Field(default_factory=lambda: ["all"])
    included_namespaces: List[str] = Field(default_factory=list)
    excluded_namespaces: List[str] = Field(default_factory=list)
    external_namespaces: List[ExternalNamespace] = Field(default_factory=list)
    sections: List[SectionSettings] = Field(default_factory=default_sections)
    templates: TemplateSet = Field(default_factory=TemplateSet)
    type_aliases: Dict[str, str] = Field(default_factory=default_type_aliases)

    @field_validator("included_types")
    @classmethod
    def _check_included_types(cls, value: List[str]) -> List[str]:
        from .documentation.models import TypeKind
        TypeKind.from_names(value)
        return value


class GeneratorSettings(BaseModel):
    """Settings for a whole generation pass."""
    output_directory: str = Field(default="docs/Generated")
    root_directory: str = Field(default=".")
    modules: List[str] = Field(default_factory=list)
    search_paths: List[str] = Field(default_factory=list)
    behaviour_bases: List[str] = Field(default_factory=list)
    asset_bases: List[str] = Field(default_factory=list)
    processor_filename: str = Field(default="all.adoc")
    processor_template: str = Field(default=DEFAULT_PROCESSOR_TEMPLATE)
    processor_entry: str = Field(default="include::{CategoryId}.adoc[]")
    processor_separator: str = Field(default="\n")
    categories: List[CategorySettings] = Field(default_factory=list)


class ProjectConfig(BaseModel):
    """Project configuration model."""
    name: str = Field(default="My Project")
    version: str = Field(default="0.1.0")
    description: Optional[str] = None


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO")


class TypedocgenConfig(BaseModel):
    """Main configuration model."""
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class Config:
    """Configuration manager for typedocgen."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file
        self.config_data = self._load_config()
        self.config = TypedocgenConfig(**self.config_data)
        self._apply_environment_overrides()

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in current directory or parent directories."""
        current_dir = Path.cwd()

        for parent in [current_dir] + list(current_dir.parents):
            for config_name in CONFIG_FILES:
                config_path = parent / config_name
                if config_path.exists():
                    logger.debug(f"Found config file: {config_path}")
                    return config_path

        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file."""
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_file:
            config_path = Path(self.config_file)
        else:
            config_path = self._find_config_file()

        if not config_path or not config_path.exists():
            logger.debug("No config file found, using defaults")
            return config

        if config_path.suffix in ['.yaml', '.yml']:
            with open(config_path, 'r') as f:
                file_config = yaml.safe_load(f) or {}
        elif config_path.suffix == '.toml':
            with open(config_path, 'r') as f:
                file_config = toml.load(f)
        elif config_path.suffix == '.json':
            with open(config_path, 'r') as f:
                file_config = json.load(f)
        else:
            logger.warning(f"Unknown config file format: {config_path}")
            return config

        if not isinstance(file_config, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")

        config = merge_dicts(config, file_config)
        self.config_file = str(config_path)
        logger.info(f"Loaded config from: {config_path}")

        return config

    def _apply_environment_overrides(self):
        """Apply environment variable overrides to configuration."""
        output_directory = os.getenv('TYPEDOCGEN_OUTPUT_DIRECTORY')
        if output_directory:
            self.config.generator.output_directory = output_directory

        log_level = os.getenv('TYPEDOCGEN_LOG_LEVEL')
        if log_level:
            self.config.logging.level = log_level

    @property
    def generator(self) -> GeneratorSettings:
        return self.config.generator

    def get(self, key: str, default: Any = None) -> Any:
        """Get the effective value of a dot-notation key, overrides included."""
        keys = key.split('.')
        value = self.config.model_dump()

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set configuration value by dot-notation key."""
        keys = key.split('.')
        config_dict = self.config_data

        for k in keys[:-1]:
            if k not in config_dict:
                config_dict[k] = {}
            config_dict = config_dict[k]

        config_dict[keys[-1]] = value

        self.config = TypedocgenConfig(**self.config_data)
        self._apply_environment_overrides()

    def save(self, path: Optional[str] = None) -> Path:
        """Save configuration to file."""
        if path:
            save_path = Path(path)
        else:
            save_path = Path(self.config_file or '.typedocgen.yaml')

        if save_path.suffix in ['.yaml', '.yml']:
            with open(save_path, 'w') as f:
                yaml.safe_dump(self.config_data, f, default_flow_style=False, sort_keys=False)
        elif save_path.suffix == '.toml':
            with open(save_path, 'w') as f:
                toml.dump(self.config_data, f)
        elif save_path.suffix == '.json':
            with open(save_path, 'w') as f:
                json.dump(self.config_data, f, indent=2)
        else:
            # Default to YAML
            save_path = save_path.with_suffix('.yaml')
            with open(save_path, 'w') as f:
                yaml.safe_dump(self.config_data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to: {save_path}")
        return save_path

    def validate(self) -> bool:
        """Validate configuration."""
        try:
            TypedocgenConfig(**self.config_data)
            return True
        except ValueError as e:
            logger.error(f"Configuration validation failed: {e}")
            return False

    @classmethod
    def create_default(cls, path: str = '.typedocgen.yaml') -> 'Config':
        """Create a default configuration file with one example category."""
        config = cls.__new__(cls)
        config.config_file = path
        config.config_data = copy.deepcopy(DEFAULT_CONFIG)
        config.config_data['generator']['modules'] = ['my_package']
        config.config_data['generator']['categories'] = [
            CategorySettings(name="Api", included_namespaces=['my_package']).model_dump()
        ]
        config.config = TypedocgenConfig(**config.config_data)
        config.save(path)
        return config
