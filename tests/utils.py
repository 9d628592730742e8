"""Shared test utilities for creating rules, plugins and configuration files."""

import json
import textwrap
from pathlib import Path
from unittest.mock import Mock

import yaml

from stylecheck.rules import Rule


def mock_rule(option_name: str) -> Mock:
    rule = Mock(spec=Rule)
    rule.get_option_name.return_value = option_name
    return rule


def registering_plugin(*rules) -> Mock:
    """Plugin that registers the given rules when run."""

    def register(configuration):
        for rule in rules:
            configuration.register_rule(rule)

    return Mock(side_effect=register)


def write_rule_file(directory: Path, filename: str, class_name: str, option_name: str) -> Path:
    source = f"""
        from stylecheck.rules import Rule


        class {class_name}(Rule):
            def __init__(self):
                self.settings = None

            def get_option_name(self):
                return "{option_name}"

            def configure(self, settings):
                self.settings = settings
    """
    return write_module(directory, filename, source)


def write_plugin_file(directory: Path, filename: str, option_name: str) -> Path:
    source = f"""
        from stylecheck.rules import OptionRule


        def register(configuration):
            configuration.register_rule(OptionRule(option_name="{option_name}"))
    """
    return write_module(directory, filename, source)


def write_module(directory: Path, filename: str, source: str) -> Path:
    path = directory / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source).lstrip(), encoding="utf-8")
    return path


def create_config_file(config_dir: Path, filename: str, config_data: dict) -> Path:
    config_path = config_dir / filename
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        if config_path.suffix in {".yml", ".yaml"}:
            yaml.dump(config_data, f)
        else:
            json.dump(config_data, f)
    return config_path
