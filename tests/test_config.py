"""Test loading and saving configuration."""

import json

import pytest
import yaml
from pydantic import ValidationError

from typedocgen.config import CategorySettings, Config, SectionSettings, TemplateSet


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("TYPEDOCGEN_OUTPUT_DIRECTORY", raising=False)
    monkeypatch.delenv("TYPEDOCGEN_LOG_LEVEL", raising=False)


@pytest.fixture
def yaml_config(tmp_path):
    path = tmp_path / ".typedocgen.yaml"
    path.write_text(yaml.safe_dump({
        "generator": {
            "output_directory": "site",
            "modules": ["game"],
            "categories": [{
                "name": "Gameplay",
                "included_types": ["class", "enum"],
                "included_namespaces": ["game"],
                "external_namespaces": [{"namespace": "builtins", "link_template": "py:{TypeName}"}],
                "templates": {"type": "* {TypeName}"},
            }],
        },
    }))
    return path


class TestLoading:
    """Test reading configuration files."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = Config()

        assert config.generator.output_directory == "docs/Generated"
        assert config.generator.processor_filename == "all.adoc"
        assert config.generator.categories == []
        assert config.config.logging.level == "INFO"

    def test_yaml_file(self, yaml_config):
        config = Config(str(yaml_config))

        assert config.config_file == str(yaml_config)
        assert config.generator.output_directory == "site"
        assert config.generator.modules == ["game"]
        assert config.generator.root_directory == "."

        category = config.generator.categories[0]
        assert category.name == "Gameplay"
        assert category.external_namespaces[0].link_template == "py:{TypeName}"
        assert category.templates.type == "* {TypeName}"
        assert category.templates.type_file == TemplateSet().type_file
        assert [section.name for section in category.sections] == [
            "Constructors", "Fields", "Properties", "Methods",
        ]

    def test_config_file_found_in_parent(self, yaml_config, tmp_path, monkeypatch):
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        config = Config()

        assert config.generator.output_directory == "site"

    def test_toml_file(self, tmp_path):
        path = tmp_path / "typedocgen.toml"
        path.write_text(
            '[generator]\n'
            'output_directory = "api"\n'
            '\n'
            '[[generator.categories]]\n'
            'name = "Demo"\n'
            'included_namespaces = ["demo"]\n'
        )

        config = Config(str(path))

        assert config.generator.output_directory == "api"
        assert config.generator.categories[0].name == "Demo"

    def test_json_file(self, tmp_path):
        path = tmp_path / "typedocgen.json"
        path.write_text(json.dumps({"logging": {"level": "DEBUG"}}))

        assert Config(str(path)).config.logging.level == "DEBUG"

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "typedocgen.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="mapping"):
            Config(str(path))

    def test_unknown_type_kind_rejected(self, tmp_path):
        path = tmp_path / "typedocgen.yaml"
        path.write_text(yaml.safe_dump({
            "generator": {"categories": [{"name": "Bad", "included_types": ["structs"]}]},
        }))

        with pytest.raises(ValidationError):
            Config(str(path))

    def test_environment_overrides(self, yaml_config, monkeypatch):
        monkeypatch.setenv("TYPEDOCGEN_OUTPUT_DIRECTORY", "elsewhere")
        monkeypatch.setenv("TYPEDOCGEN_LOG_LEVEL", "WARNING")

        config = Config(str(yaml_config))

        assert config.generator.output_directory == "elsewhere"
        assert config.config.logging.level == "WARNING"


class TestAccess:
    """Test dotted access and saving."""

    def test_get_and_set(self, yaml_config):
        config = Config(str(yaml_config))

        assert config.get("generator.output_directory") == "site"
        assert config.get("generator.missing", "fallback") == "fallback"

        config.set("generator.output_directory", "build/docs")

        assert config.generator.output_directory == "build/docs"

    def test_get_sees_environment_overrides(self, yaml_config, monkeypatch):
        monkeypatch.setenv("TYPEDOCGEN_OUTPUT_DIRECTORY", "elsewhere")
        config = Config(str(yaml_config))

        assert config.get("generator.output_directory") == "elsewhere"
        assert config.get("generator.output_directory") == config.generator.output_directory

        config.set("generator.modules", ["other"])

        assert config.generator.output_directory == "elsewhere"
        assert config.get("generator.modules") == ["other"]

    def test_save_round_trip(self, yaml_config, tmp_path):
        config = Config(str(yaml_config))

        saved = config.save(str(tmp_path / "copy.yml"))
        reloaded = Config(str(saved))

        assert reloaded.generator == config.generator

    def test_save_unknown_suffix_writes_yaml(self, yaml_config, tmp_path):
        saved = Config(str(yaml_config)).save(str(tmp_path / "settings.cfg"))

        assert saved.suffix == ".yaml"
        assert yaml.safe_load(saved.read_text())["generator"]["output_directory"] == "site"

    def test_validate(self, yaml_config):
        config = Config(str(yaml_config))
        assert config.validate()

        config.config_data["generator"]["categories"][0]["included_types"] = ["structs"]
        assert not config.validate()

    def test_create_default(self, tmp_path):
        path = tmp_path / ".typedocgen.yaml"

        Config.create_default(str(path))
        config = Config(str(path))

        assert config.generator.modules == ["my_package"]
        assert [category.name for category in config.generator.categories] == ["Api"]
        assert config.generator.categories[0].included_namespaces == ["my_package"]


class TestSettings:
    """Test settings models."""

    def test_category_defaults(self):
        settings = CategorySettings(name="Demo")

        assert settings.included_types == ["all"]
        assert settings.type_aliases["Int32"] == "int"
        assert settings.include_in_table_of_contents

    def test_type_aliases_are_not_shared(self):
        first = CategorySettings(name="First")
        first.type_aliases["Int32"] = "integer"

        assert CategorySettings(name="Second").type_aliases["Int32"] == "int"

    def test_member_kinds_normalised(self):
        assert SectionSettings(name="Methods", member_kinds=["Method"]).member_kinds == ["method"]

    def test_unknown_member_kind_rejected(self):
        with pytest.raises(ValidationError):
            SectionSettings(name="Events", member_kinds=["event"])
