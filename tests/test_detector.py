"""Tests for project root detection."""

import os
from unittest.mock import patch

from envswitch.environments.detector import ProjectDetector


class TestProjectDetector:
    """Test project root detection."""

    def test_explicit_directory(self, temp_directory):
        assert ProjectDetector().find_project_root(temp_directory) == os.path.abspath(temp_directory)

    def test_explicit_missing_directory(self, temp_directory):
        missing = os.path.join(temp_directory, 'missing')

        assert ProjectDetector().find_project_root(missing) is None

    def test_explicit_file_is_not_a_project(self, temp_directory):
        path = os.path.join(temp_directory, 'file.txt')
        with open(path, 'w') as f:
            f.write('x')

        assert ProjectDetector().find_project_root(path) is None

    def test_finds_vscode_marker_in_parent(self, project_root):
        nested = os.path.join(project_root, 'src', 'app')
        os.makedirs(nested)

        assert ProjectDetector(nested).find_project_root() == os.path.abspath(project_root)

    def test_finds_git_marker(self, temp_directory):
        root = os.path.join(temp_directory, 'repo')
        os.makedirs(os.path.join(root, '.git'))

        assert ProjectDetector(root).find_project_root() == os.path.abspath(root)

    def test_defaults_to_current_directory(self, project_root, monkeypatch):
        monkeypatch.chdir(project_root)

        assert os.path.realpath(ProjectDetector().find_project_root()) == os.path.realpath(project_root)

    def test_no_marker_anywhere(self, temp_directory):
        with patch('os.path.exists', return_value=False):
            assert ProjectDetector(temp_directory).find_project_root() is None

    def test_is_project_root(self, project_root, temp_directory):
        detector = ProjectDetector()

        assert detector.is_project_root(project_root)
        assert not detector.is_project_root(os.path.join(project_root, '.vscode'))
