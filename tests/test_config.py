"""Tests for group registration and YAML configuration loading."""

import pytest

from related_files import append_group, resolve_for_current_path
from related_files.config import ConfigManager, Group, GroupRegistry
from related_files.exceptions import ConfigurationError, ValidationError


class TestGroupArity:
    @pytest.mark.parametrize("count", [2, 3, 4])
    def test_two_to_four_patterns_are_accepted(self, registry, count):
        patterns = [f"%1.ext{index}" for index in range(count)]

        group = registry.append_group(*patterns)

        assert len(group) == count
        assert len(registry) == 1

    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_other_counts_raise_configuration_error(self, registry, count):
        patterns = [f"%1.ext{index}" for index in range(count)]

        with pytest.raises(ConfigurationError):
            registry.append_group(*patterns)

        assert len(registry) == 0

    def test_single_pattern_group(self, registry):
        with pytest.raises(ConfigurationError, match="between 2 and 4"):
            registry.append_group("only_one.txt")


class TestGroupRegistry:
    def test_registration_order_is_preserved(self, registry):
        first = registry.append_group("%1.a", "%1.b")
        second = registry.append_group("%1.c", "%1.d", name="cd")

        assert registry.groups == (first, second)
        assert list(registry) == [first, second]
        assert second.describe() == "cd"
        assert first.describe() == "%1.a | %1.b"

    def test_groups_snapshot_is_immutable(self, registry):
        registry.append_group("%1.a", "%1.b")
        snapshot = registry.groups

        registry.append_group("%1.c", "%1.d")

        assert len(snapshot) == 1
        assert len(registry) == 2


class TestDefaultRegistry:
    def test_module_level_helpers_share_one_registry(self, clean_default_registry, tmp_path):
        (tmp_path / "x_y.foo").write_text("", encoding="utf-8")
        (tmp_path / "x_y.bar").write_text("", encoding="utf-8")

        append_group(f"{tmp_path}/%1_%2.foo", f"{tmp_path}/%1_%2.bar")
        resolved = resolve_for_current_path(str(tmp_path / "x_y.foo"))

        assert len(clean_default_registry) == 1
        assert resolved.paths == (str(tmp_path / "x_y.foo"), str(tmp_path / "x_y.bar"))

    def test_missing_file_gives_no_match(self, clean_default_registry, tmp_path):
        (tmp_path / "x_y.foo").write_text("", encoding="utf-8")

        append_group(f"{tmp_path}/%1_%2.foo", f"{tmp_path}/%1_%2.bar")

        assert resolve_for_current_path(str(tmp_path / "x_y.foo")) is None

    def test_module_level_arity_check(self, clean_default_registry):
        with pytest.raises(ConfigurationError):
            append_group("a", "b", "c", "d", "e")


class TestConfigManager:
    def test_loads_list_and_mapping_groups_in_order(self, write_config):
        path = write_config(
            {
                "groups": [
                    ["%1_%2.foo", "%1_%2.bar"],
                    {
                        "name": "rails",
                        "patterns": ["%1/app/controllers/%2.rb", "%1/test/functional/%2_test.rb"],
                    },
                ]
            }
        )
        manager = ConfigManager(str(path))
        manager.load()

        groups = manager.get_groups()

        assert groups == [
            Group(("%1_%2.foo", "%1_%2.bar")),
            Group(("%1/app/controllers/%2.rb", "%1/test/functional/%2_test.rb"), name="rails"),
        ]

    def test_build_registry_appends_after_existing_groups(self, write_config):
        path = write_config({"groups": [["%1.c", "%1.h"]]})
        manager = ConfigManager(str(path))
        manager.load()
        registry = GroupRegistry()
        registry.append_group("%1.a", "%1.b")

        manager.build_registry(registry)

        assert [group.patterns for group in registry] == [("%1.a", "%1.b"), ("%1.c", "%1.h")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigManager(str(tmp_path / "nope.yaml")).load()

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("groups: [\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigManager(str(path)).load()

    def test_empty_file_has_no_groups(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        manager = ConfigManager(str(path))
        manager.load()

        assert manager.get_groups() == []

    def test_null_groups_key_loads_as_no_groups(self, tmp_path):
        path = tmp_path / "related.yaml"
        path.write_text("groups:\nlogging:\n", encoding="utf-8")
        manager = ConfigManager(str(path))
        manager.load()

        assert manager.get_groups() == []
        assert manager.get_logging_config()["level"] == "INFO"

    def test_empty_string_is_a_valid_pattern(self, write_config):
        path = write_config({"groups": [["", "%1.bar"]]})
        manager = ConfigManager(str(path))
        manager.load()

        assert manager.get_groups() == [Group(("", "%1.bar"))]

    @pytest.mark.parametrize(
        "data",
        [
            ["not", "a", "mapping"],
            {"groups": "%1.foo"},
            {"groups": ["%1.foo"]},
            {"groups": [{"name": "x"}]},
            {"groups": [["%1.foo", 3]]},
            {"groups": [{"name": 7, "patterns": ["%1.a", "%1.b"]}]},
            {"logging": "verbose"},
            {"logging": {"level": 10}},
        ],
    )
    def test_malformed_configuration(self, write_config, data):
        path = write_config(data)

        with pytest.raises(ValidationError):
            ConfigManager(str(path)).load()

    @pytest.mark.parametrize("patterns", [["only_one.txt"], ["a", "b", "c", "d", "e"]])
    def test_wrong_group_size_in_file(self, write_config, patterns):
        path = write_config({"groups": [patterns]})
        manager = ConfigManager(str(path))
        manager.load()

        with pytest.raises(ConfigurationError):
            manager.get_groups()

    def test_logging_defaults_are_merged(self, write_config):
        path = write_config({"logging": {"level": "DEBUG"}})
        manager = ConfigManager(str(path))
        manager.load()

        logging_config = manager.get_logging_config()

        assert logging_config["level"] == "DEBUG"
        assert logging_config["console"] is True
        assert logging_config["file"] is None
