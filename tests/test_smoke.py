"""
Smoke tests — verify the bootstrap is healthy.

These tests ensure the basic scaffolding works:
- Package imports successfully
- CLI entrypoint responds
- Version is set
"""

from click.testing import CliRunner

from formkit import __version__
from formkit.main import cli


class TestBootstrap:
    """Verify the project bootstrap is healthy."""

    def test_version_is_set(self):
        """Version string should be defined and non-empty."""
        assert __version__
        assert isinstance(__version__, str)

    def test_cli_help(self):
        """CLI --help should exit cleanly with usage info."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "form fields that know their validation rules" in result.output

    def test_cli_version(self):
        """CLI --version should print the version."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_make_group_registered(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["make", "--help"])
        assert result.exit_code == 0
        assert "form" in result.output

    def test_core_package_imports(self):
        """Core sub-packages should be importable."""
        import formkit.core
        import formkit.core.config
        import formkit.core.models
        import formkit.core.observability
        import formkit.core.services
        import formkit.core.services.generators
        import formkit.core.use_cases
        import formkit.ui.cli
        assert formkit.core is not None
