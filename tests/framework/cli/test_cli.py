import yaml
from click.testing import CliRunner

from guardkit import __version__ as version
from guardkit.errors import ArgumentError
from guardkit.factory import register_error_kind
from guardkit.framework.cli.cli import cli
from guardkit.framework.cli.utils import GuardkitCliError
from tests.conftest import DefaultConstructorOnlyError, PlainError


class TestCliCommands:
    def test_cli(self):
        """Run `guardkit` without arguments."""
        result = CliRunner().invoke(cli, [])

        # click 8.2 and later exit with a usage error code when no command is given
        assert result.exit_code in (0, 2)
        assert "Usage: guardkit" in result.output
        assert "kinds" in result.output

    def test_print_version(self):
        """Check that `guardkit --version` and `guardkit -V` outputs contain
        the current package version."""
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert version in result.output

        result_abr = CliRunner().invoke(cli, ["-V"])
        assert result_abr.exit_code == 0
        assert version in result_abr.output

    def test_info_contains_plugin_versions(self, entry_point):
        entry_point.dist.version = "1.0.2"
        entry_point.module = "guardkit_audit.hooks"

        result = CliRunner().invoke(cli, ["info"])
        assert result.exit_code == 0
        assert f"guardkit v{version}" in result.output
        assert "guardkit_audit: 1.0.2 (entry points:hooks)" in result.output

        entry_point.load.assert_not_called()

    def test_info_without_plugins(self, entry_points):
        entry_points.return_value.select.return_value = []

        result = CliRunner().invoke(cli, ["info"])
        assert result.exit_code == 0

        split_result = result.output.strip().split("\n")
        assert split_result[-1] == "No plugins installed"
        entry_points.return_value.select.assert_called_once_with(
            group="guardkit.hooks"
        )

    def test_help(self):
        """Check that `guardkit --help` returns a valid help message."""
        result = CliRunner().invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "guardkit is a CLI for inspecting error kinds" in result.output

        result = CliRunner().invoke(cli, ["-h"])
        assert result.exit_code == 0
        assert "Show this message and exit." in result.output


class TestKindsListCommand:
    def test_list_well_known_kinds(self):
        result = CliRunner().invoke(cli, ["kinds", "list"])

        assert result.exit_code == 0
        listed = yaml.safe_load(result.output)
        assert set(listed) == {
            "guardkit.errors.ArgumentError",
            "guardkit.errors.ArgumentNullError",
            "guardkit.errors.ArgumentOutOfRangeError",
            "guardkit.errors.ArgumentVerifyError",
        }
        assert listed["guardkit.errors.ArgumentError"] == [
            "no_args",
            "two_strings",
            "parameter_only",
            "message_only",
        ]

    def test_list_includes_registered_kinds(self):
        register_error_kind(PlainError)

        result = CliRunner().invoke(cli, ["kinds", "list"])

        assert result.exit_code == 0
        listed = yaml.safe_load(result.output)
        assert listed["tests.conftest.PlainError"] == [
            "no_args",
            "single_string",
            "two_strings",
        ]


class TestKindsDescribeCommand:
    def test_describe_well_known_kind(self):
        result = CliRunner().invoke(
            cli, ["kinds", "describe", "guardkit.errors.ArgumentError"]
        )

        assert result.exit_code == 0
        description = yaml.safe_load(result.output)
        assert description == {
            "kind": "guardkit.errors.ArgumentError",
            "well_known": True,
            "registered": True,
            "argument_order": ["message", "parameter"],
            "paths": ["no_args", "two_strings", "parameter_only", "message_only"],
        }

    def test_describe_arbitrary_kind(self):
        result = CliRunner().invoke(
            cli, ["kinds", "describe", "tests.conftest.DefaultConstructorOnlyError"]
        )

        assert result.exit_code == 0
        description = yaml.safe_load(result.output)
        assert description == {
            "kind": f"tests.conftest.{DefaultConstructorOnlyError.__qualname__}",
            "well_known": False,
            "registered": False,
            "argument_order": None,
            "paths": ["no_args"],
        }

    def test_describe_missing_module(self):
        result = CliRunner().invoke(cli, ["kinds", "describe", "missing.MissingError"])

        assert result.exit_code == 1
        assert "Unable to load error kind 'missing.MissingError'" in result.output

    def test_describe_missing_attribute(self):
        result = CliRunner().invoke(
            cli, ["kinds", "describe", "guardkit.errors.MissingError"]
        )

        assert result.exit_code == 1
        assert "Unable to load error kind 'guardkit.errors.MissingError'" in (
            result.output
        )

    def test_describe_not_an_error_kind(self):
        result = CliRunner().invoke(
            cli, ["kinds", "describe", "guardkit.utils.load_obj"]
        )

        assert result.exit_code == 1
        assert "Error kinds must be exception classes" in result.output

    def test_verbose_error_shows_traceback(self):
        result = CliRunner().invoke(
            cli, ["-v", "kinds", "describe", "guardkit.errors.MissingError"]
        )

        assert result.exit_code == 1
        assert GuardkitCliError.VERBOSE_ERROR
        assert "Traceback (most recent call last)" in result.output
        assert "AttributeError" in result.output

    def test_describe_is_consistent_with_registry(self, mocker):
        describe = mocker.patch(
            "guardkit.factory.registry.ErrorKindRegistry.describe",
            return_value={"kind": "stub"},
        )

        result = CliRunner().invoke(
            cli, ["kinds", "describe", "guardkit.errors.ArgumentError"]
        )

        assert result.exit_code == 0
        describe.assert_called_once_with(ArgumentError)
        assert yaml.safe_load(result.output) == {"kind": "stub"}
