"""Tests for settings management."""

import os
from unittest.mock import patch

import pytest

from envswitch.config.manager import SettingsManager
from envswitch.config.schemas import DEFAULT_SETTINGS
from envswitch.config.validator import SettingsValidator
from envswitch.utils.errors import ConfigurationError


def write_settings(project_root, content):
    path = os.path.join(project_root, '.vscode', 'envswitch.yml')
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path


class TestSettingsManager:
    """Test settings loading."""

    def test_defaults_without_file(self, project_root):
        settings = SettingsManager(project_root).load_settings()

        assert settings == DEFAULT_SETTINGS

    def test_defaults_without_project(self):
        manager = SettingsManager(None)

        assert manager.get_settings_path() is None
        assert manager.load_settings() == DEFAULT_SETTINGS

    def test_settings_path(self, project_root):
        manager = SettingsManager(project_root)

        assert manager.get_settings_path() == os.path.join(project_root, '.vscode', 'envswitch.yml')

    def test_load_valid_yaml(self, project_root):
        write_settings(project_root, """
indicator:
  alignment: left
prompt:
  title: Pick an environment
""")

        settings = SettingsManager(project_root).load_settings()

        assert settings['indicator']['alignment'] == 'left'
        assert settings['prompt']['title'] == 'Pick an environment'
        assert settings['prompt']['hint'] == DEFAULT_SETTINGS['prompt']['hint']

    def test_empty_file_uses_defaults(self, project_root):
        write_settings(project_root, '')

        assert SettingsManager(project_root).load_settings() == DEFAULT_SETTINGS

    def test_invalid_yaml(self, project_root):
        write_settings(project_root, 'indicator: [unclosed\n')

        with pytest.raises(ConfigurationError) as exc_info:
            SettingsManager(project_root).load_settings()

        assert 'Invalid YAML' in exc_info.value.message
        assert exc_info.value.suggestions

    def test_schema_violation(self, project_root):
        write_settings(project_root, 'indicator:\n  alignment: center\n')

        with pytest.raises(ConfigurationError) as exc_info:
            SettingsManager(project_root).load_settings()

        assert 'Invalid settings' in exc_info.value.message
        assert 'indicator.alignment' in exc_info.value.details

    def test_settings_are_cached(self, project_root):
        write_settings(project_root, 'indicator:\n  alignment: left\n')
        manager = SettingsManager(project_root)
        manager.load_settings()

        with patch('builtins.open') as mock_open:
            settings = manager.load_settings()

        mock_open.assert_not_called()
        assert settings['indicator']['alignment'] == 'left'

    def test_defaults_not_mutated(self, project_root):
        write_settings(project_root, 'prompt:\n  hint: Use me\n')

        SettingsManager(project_root).load_settings()

        assert DEFAULT_SETTINGS['prompt']['hint'] == 'Activate this environment'


class TestSettingsValidator:
    """Test settings validation."""

    def setup_method(self):
        self.validator = SettingsValidator()

    def test_valid(self):
        assert self.validator.validate_settings({'indicator': {'alignment': 'right'}}) == []

    def test_unknown_section(self):
        errors = self.validator.validate_settings({'config_dir': 'elsewhere'})

        assert len(errors) == 1
        assert 'config_dir' in errors[0]

    def test_empty_title(self):
        errors = self.validator.validate_settings({'prompt': {'title': ''}})

        assert errors and errors[0].startswith('prompt.title')

    def test_not_a_mapping(self):
        errors = self.validator.validate_settings(['indicator'])

        assert errors == ['Settings must be a mapping, got list']
