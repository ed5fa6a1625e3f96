"""Tests for the version bump script."""

from scripts.update_version import update_version


class TestUpdateVersion:
    """Test update_version against temporary project files."""

    def test_updates_both_files(self, tmp_path):
        """Test that the project version and __version__ are rewritten."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            '[project]\nname = "fizzbuzz-cps"\nversion = "0.1.0"\n\n'
            '[tool.other]\nversion = "9.9.9"\n'
        )
        version_file = tmp_path / "_version.py"
        version_file.write_text('"""Version."""\n\n__version__ = "0.1.0"\n')

        update_version("0.2.0", pyproject_path=pyproject, version_path=version_file)

        content = pyproject.read_text()
        assert 'version = "0.2.0"' in content
        # Only the first version field is touched
        assert 'version = "9.9.9"' in content
        assert '__version__ = "0.2.0"' in version_file.read_text()
