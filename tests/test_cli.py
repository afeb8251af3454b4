"""
Tests for the ``statica`` command line interface.

``StaticSite.run`` is mocked out, so no server is started.
"""

import pytest

from statica.__version__ import __version__
from statica.api import StaticSite

# Skip test if optional CLI dependency is not installed.
pytest.importorskip("docopt", reason="docopt-ng package not installed")

from statica.cli import cli  # noqa: E402


@pytest.fixture
def run(mocker):
    return mocker.patch.object(StaticSite, "run")


def test_cli_version(capsys):
    with pytest.raises(SystemExit):
        cli(["--version"])
    assert capsys.readouterr().out.strip() == __version__


def test_cli_serve(run, site_dir):
    cli(["serve", "--port=8080", str(site_dir)])
    run.assert_called_once_with(address=None, port=8080)


def test_cli_serve_with_config(mocker, site_dir, tmp_path):
    path = tmp_path / "statica.yml"
    path.write_text(f"root: {site_dir}\n", encoding="utf-8")
    site_cls = mocker.patch("statica.cli.StaticSite")

    cli(["serve", f"--config={path}", "--address=0.0.0.0", "--error-page=404.html"])

    (config,), options = site_cls.call_args
    assert config.root == str(site_dir)
    assert options == {"root": None, "error_page": "404.html", "debug": False}
    site_cls.return_value.run.assert_called_once_with(address="0.0.0.0", port=None)


@pytest.mark.parametrize(
    "port",
    [
        pytest.param("http", id="not a number"),
        pytest.param("0", id="zero"),
        pytest.param("70000", id="too large"),
    ],
)
def test_cli_invalid_port(run, port):
    with pytest.raises(SystemExit) as excinfo:
        cli(["serve", f"--port={port}"])
    assert excinfo.value.code == 1
    run.assert_not_called()


def test_cli_invalid_config(run, tmp_path):
    path = tmp_path / "statica.yml"
    path.write_text("cache_control:\n  index.html: -1\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli(["serve", f"--config={path}"])
    assert excinfo.value.code == 1
    run.assert_not_called()
