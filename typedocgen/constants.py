"""
Constants for typedocgen.
"""

CONFIG_FILES = [
    '.typedocgen.yaml',
    '.typedocgen.yml',
    '.typedocgen.toml',
    '.typedocgen.json',
]

DEFAULT_PROCESSOR_TEMPLATE = """:multipage-level: 1
:icons: font
:source-highlighter: highlightjs
:experimental:
:example-caption!:
:figure-caption!:
:table-caption!:

{Categories}
"""

DEFAULT_CONFIG = {
    'project': {
        'name': 'My Project',
        'version': '0.1.0',
    },
    'generator': {
        'output_directory': 'docs/Generated',
        'root_directory': '.',
        'modules': [],
        'search_paths': [],
        'behaviour_bases': [],
        'asset_bases': [],
        'processor_filename': 'all.adoc',
        'processor_template': DEFAULT_PROCESSOR_TEMPLATE,
        'processor_entry': 'include::{CategoryId}.adoc[]',
        'processor_separator': '\n',
        'categories': [],
    },
    'logging': {
        'level': 'INFO',
    },
}

# Raw names of built-in types and the short form they are displayed with
DEFAULT_TYPE_ALIASES = {
    'Void': 'void',
    'Boolean': 'bool',
    'Int32': 'int',
    'Single': 'float',
    'String': 'string',
    'NoneType': 'None',
}
