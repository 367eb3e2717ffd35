from unittest.mock import patch

import pytest
from click.testing import CliRunner

from tagmanager.cli.main import cli


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "config" / "config.yaml"


@pytest.fixture
def workspace(tmp_path, go_mod):
    """A search root holding a single module, example.com/mypkg."""
    root = tmp_path / "workspace"
    go_mod(root / "mypkg", "example.com/mypkg")
    return root


@pytest.fixture
def invoke(config_file):
    """
    Run the CLI against a temporary configuration file.

    `vcs` replaces the GitClient the command would construct.
    """

    def _invoke(command, args, vcs, input=None):
        runner = CliRunner()
        with patch(f"tagmanager.cli.{command}.GitClient", return_value=vcs):
            return runner.invoke(
                cli,
                ["--config", str(config_file), command] + list(args),
                input=input,
                env={"COLUMNS": "200"},
            )

    return _invoke
