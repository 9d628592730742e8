"""Tests for the configuration engine."""

from unittest.mock import Mock

import pytest

from stylecheck.config import Configuration, ConfigurationError, ErrorKind
from stylecheck.rules import BUILTIN_RULE_NAMES, OptionRule
from tests.utils import mock_rule, registering_plugin


class TestConfigurationDefaults:
    def test_initial_state(self, configuration):
        assert configuration.get_file_extensions() == [".js"]
        assert configuration.get_excluded_files() == []
        assert configuration.get_configured_rules() == []
        assert configuration.get_registered_rules() == []
        assert configuration.get_preset_names() == []

    def test_register_default_rules(self, configuration):
        configuration.register_default_rules()

        names = [rule.get_option_name() for rule in configuration.get_registered_rules()]
        assert names == list(BUILTIN_RULE_NAMES)

    def test_register_default_presets(self, configuration):
        configuration.register_default_presets()

        assert configuration.get_preset_names() == [
            "airbnb",
            "crockford",
            "google",
            "jquery",
            "mdcs",
            "wikimedia",
            "yandex",
        ]
        assert configuration.get_preset("google")["validateIndentation"] == 2


class TestRegistries:
    def test_register_rule_last_write_wins(self, configuration):
        first = mock_rule("disallow-empty-blocks")
        second = mock_rule("disallow-empty-blocks")

        configuration.register_rule(first)
        configuration.register_rule(second)
        configuration.load({"disallow-empty-blocks": True})

        first.configure.assert_not_called()
        second.configure.assert_called_once_with(True)
        assert configuration.get_registered_rules() == [second]

    def test_register_preset_last_write_wins(self, configuration):
        configuration.register_preset("p", {"a": 1})
        configuration.register_preset("p", {"b": 2})

        assert configuration.get_preset("p") == {"b": 2}
        assert configuration.get_preset_names() == ["p"]

    def test_get_preset_unknown(self, configuration):
        assert configuration.get_preset("missing") is None


class TestLoad:
    def setup_method(self):
        self.configuration = Configuration()
        self.empty_blocks = mock_rule("disallow-empty-blocks")
        self.curly_braces = mock_rule("require-curly-braces")
        self.configuration.register_rule(self.empty_blocks)
        self.configuration.register_rule(self.curly_braces)

    def test_configures_matching_rules(self):
        self.configuration.load({"require-curly-braces": ["if"], "disallow-empty-blocks": True})

        self.curly_braces.configure.assert_called_once_with(["if"])
        self.empty_blocks.configure.assert_called_once_with(True)
        assert self.configuration.get_configured_rules() == [
            self.curly_braces,
            self.empty_blocks,
        ]

    def test_configured_rules_only_include_mentioned_rules(self):
        self.configuration.load({"disallow-empty-blocks": True})

        assert self.configuration.get_configured_rules() == [self.empty_blocks]
        self.curly_braces.configure.assert_not_called()

    def test_outer_config_overrides_preset(self):
        self.configuration.register_preset("p", {"disallow-empty-blocks": True})

        self.configuration.load({"preset": "p", "disallow-empty-blocks": False})

        self.empty_blocks.configure.assert_called_once_with(False)

    def test_preset_rules_are_configured(self):
        self.configuration.register_preset("p", {"disallow-empty-blocks": True})

        self.configuration.load({"preset": "p", "require-curly-braces": True})

        assert self.configuration.get_configured_rules() == [
            self.empty_blocks,
            self.curly_braces,
        ]

    def test_file_extensions_string(self):
        self.configuration.load({"fileExtensions": ".jsx"})

        assert self.configuration.get_file_extensions() == [".jsx"]

    def test_file_extensions_list(self):
        self.configuration.load({"fileExtensions": [".js", ".jsx"]})

        assert self.configuration.get_file_extensions() == [".js", ".jsx"]

    def test_excluded_files(self):
        self.configuration.load({"excludeFiles": ["node_modules/**"]})

        assert self.configuration.get_excluded_files() == ["node_modules/**"]

    def test_file_options_from_preset(self):
        self.configuration.register_preset(
            "p", {"fileExtensions": ".es6", "excludeFiles": ["dist/**"]}
        )

        self.configuration.load({"preset": "p", "excludeFiles": ["build/**"]})

        assert self.configuration.get_file_extensions() == [".es6"]
        assert self.configuration.get_excluded_files() == ["build/**"]

    def test_plugin_registers_rule(self):
        custom_rule = mock_rule("custom-rule")
        plugin = registering_plugin(custom_rule)

        self.configuration.load({"plugins": [plugin], "custom-rule": 5})

        plugin.assert_called_once_with(self.configuration)
        custom_rule.configure.assert_called_once_with(5)
        assert self.configuration.get_configured_rules() == [custom_rule]

    def test_plugin_registers_preset(self):
        def plugin(configuration):
            configuration.register_preset("from-plugin", {"disallow-empty-blocks": "all"})

        self.configuration.load({"plugins": [plugin], "preset": "from-plugin"})

        self.empty_blocks.configure.assert_called_once_with("all")

    def test_additional_rule_object(self):
        extra = mock_rule("extra-rule")

        self.configuration.load({"additionalRules": [extra], "extra-rule": {"max": 3}})

        extra.configure.assert_called_once_with({"max": 3})

    def test_additional_rule_replaces_registered_rule(self):
        replacement = mock_rule("disallow-empty-blocks")

        self.configuration.load({"additionalRules": [replacement], "disallow-empty-blocks": 1})

        replacement.configure.assert_called_once_with(1)
        self.empty_blocks.configure.assert_not_called()


class TestUnsupportedRules:
    def setup_method(self):
        self.configuration = Configuration()
        self.known = mock_rule("known-rule")
        self.configuration.register_rule(self.known)

    def test_single_unknown_rule(self):
        with pytest.raises(ConfigurationError, match="Unsupported rules: unknown-rule") as exc_info:
            self.configuration.load({"unknown-rule": True})

        assert exc_info.value.kind == ErrorKind.UNSUPPORTED_RULES
        assert exc_info.value.names == ["unknown-rule"]

    def test_unknown_rules_reported_in_order(self):
        with pytest.raises(ConfigurationError) as exc_info:
            self.configuration.load({"k1": 1, "known-rule": True, "k2": 2})

        assert exc_info.value.names == ["k1", "k2"]
        assert str(exc_info.value) == "Unsupported rules: k1, k2"

    def test_non_string_rule_names_reported(self):
        with pytest.raises(ConfigurationError, match="Unsupported rules: True, 3") as exc_info:
            self.configuration.load({True: True, 3: "x"})

        assert exc_info.value.names == [True, 3]

    def test_known_rules_configured_despite_failure(self):
        with pytest.raises(ConfigurationError):
            self.configuration.load({"unknown-rule": True, "known-rule": "yes"})

        self.known.configure.assert_called_once_with("yes")

    def test_failed_load_keeps_previous_configured_rules(self):
        self.configuration.load({"known-rule": 1})

        with pytest.raises(ConfigurationError):
            self.configuration.load({"unknown-rule": True})

        assert self.configuration.get_configured_rules() == [self.known]

    def test_unknown_rule_from_preset(self):
        self.configuration.register_preset("p", {"from-preset": True})

        with pytest.raises(ConfigurationError) as exc_info:
            self.configuration.load({"preset": "p"})

        assert exc_info.value.names == ["from-preset"]


class TestStructuralErrors:
    def test_preset_not_found(self, configuration):
        with pytest.raises(ConfigurationError, match='Preset "missing" was not found') as exc_info:
            configuration.load({"preset": "missing"})

        assert exc_info.value.kind == ErrorKind.PRESET_NOT_FOUND

    def test_invalid_plugin(self, configuration):
        with pytest.raises(ConfigurationError) as exc_info:
            configuration.load({"plugins": ["some.module"]})

        assert exc_info.value.kind == ErrorKind.INVALID_PLUGIN

    def test_invalid_additional_rule(self, configuration):
        with pytest.raises(ConfigurationError) as exc_info:
            configuration.load({"additionalRules": ["rules/*.py"]})

        assert exc_info.value.kind == ErrorKind.INVALID_ADDITIONAL_RULE

    def test_plugin_side_effects_not_rolled_back(self, configuration):
        rule = mock_rule("from-plugin")

        with pytest.raises(ConfigurationError):
            configuration.load({"plugins": [registering_plugin(rule)], "preset": "missing"})

        assert configuration.get_registered_rules() == [rule]

    def test_invalid_type_leaves_file_options_untouched(self, configuration):
        with pytest.raises(ConfigurationError):
            configuration.load({"fileExtensions": ".jsx", "excludeFiles": "dist"})

        assert configuration.get_file_extensions() == [".js"]
        assert configuration.get_excluded_files() == []

    def test_rule_configure_error_propagates(self, configuration):
        rule = mock_rule("strict-rule")
        rule.configure.side_effect = ValueError("strict-rule requires true")
        configuration.register_rule(rule)

        with pytest.raises(ValueError, match="requires true"):
            configuration.load({"strict-rule": False})


class TestIdempotence:
    def test_loading_same_config_twice(self):
        config = {"requireCurlyBraces": ["if", "else"], "validateIndentation": 2}
        configuration = Configuration()
        configuration.register_default_rules()

        configuration.load(config)
        first = [(r.get_option_name(), r.settings) for r in configuration.get_configured_rules()]
        configuration.load(config)
        second = [(r.get_option_name(), r.settings) for r in configuration.get_configured_rules()]

        assert first == second == [
            ("requireCurlyBraces", ["if", "else"]),
            ("validateIndentation", 2),
        ]

    def test_configured_rules_rebuilt_on_each_load(self):
        configuration = Configuration()
        configuration.register_rule(OptionRule(option_name="a"))
        configuration.register_rule(OptionRule(option_name="b"))

        configuration.load({"a": 1})
        configuration.load({"b": 2})

        assert [r.get_option_name() for r in configuration.get_configured_rules()] == ["b"]

    def test_returned_lists_are_copies(self):
        configuration = Configuration()

        configuration.get_file_extensions().append(".ts")

        assert configuration.get_file_extensions() == [".js"]


class TestLoaderInjection:
    def test_custom_loaders_are_used(self):
        plugin_loader = Mock()
        rule_loader = Mock()
        configuration = Configuration(
            plugin_loader=plugin_loader, additional_rule_loader=rule_loader
        )

        configuration.load({"plugins": ["p"], "additionalRules": ["r"]})

        plugin_loader.load.assert_called_once_with("p", configuration)
        rule_loader.load.assert_called_once_with("r", configuration)
