"""Tests for the GitHub Actions output boundary."""

import os
from unittest.mock import patch

import click
from click.testing import CliRunner

from hubtags_cli import actions


class TestSetOutput:
    def test_appends_to_github_output(self, tmp_path):
        output_file = tmp_path / "output"
        output_file.write_text("existing=1\n", encoding="utf-8")
        with patch.dict(os.environ, {"GITHUB_OUTPUT": str(output_file)}):
            actions.set_output("tags", [{"version": "1.0.0"}])

        lines = output_file.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "existing=1"
        assert lines[1].startswith("tags<<ghadelimiter_")
        assert lines[2] == '[{"version": "1.0.0"}]'
        assert lines[3] == lines[1].split("<<", 1)[1]

    def test_prints_without_github_output(self):
        @click.command()
        def cmd():
            actions.set_output("tags", [], pretty=False)

        runner = CliRunner()
        result = runner.invoke(cmd, env={"GITHUB_OUTPUT": None})
        assert result.exit_code == 0
        assert result.output.strip() == "[]"


class TestSetFailed:
    def _invoke(self, env):
        @click.command()
        def cmd():
            actions.set_failed("bad\nthing 100%")

        return CliRunner().invoke(cmd, env=env)

    def test_error_annotation_in_actions(self):
        result = self._invoke({"GITHUB_ACTIONS": "true"})
        assert "::error::bad%0Athing 100%25" in result.output

    def test_silent_outside_actions(self):
        result = self._invoke({"GITHUB_ACTIONS": None})
        assert result.output == ""
