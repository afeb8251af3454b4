"""
Statica CLI.

Serve a directory of static assets.

Usage:
  statica serve [--debug] [--config=<file>] [--port=<port>] [--address=<addr>] [--error-page=<file>] [<root>]
  statica --version

Options:
  -h --help              Show this screen.
  -v --version           Show version.
  --debug                Enable debug mode with verbose logging.
  --config=<file>        YAML or JSON site configuration.
  --port=<port>          Port to listen on.
  --address=<addr>       Address to bind to.
  --error-page=<file>    Error page overriding the configured one.

Arguments:
  <root>      Directory to serve. Overrides the configured root.

Examples:
  statica serve public                      # Serve ./public
  statica serve --config=statica.yml        # Serve the configured root
"""  # noqa: E501

import logging
import sys
import typing as t

import docopt

from statica.__version__ import __version__
from statica.api import StaticSite
from statica.config import Config
from statica.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def cli(argv: t.Optional[t.List[str]] = None) -> None:
    """
    Main entry point for the Statica CLI.

    Parses command line arguments, loads the configuration and starts serving.
    """
    args = docopt.docopt(__doc__, argv=argv, version=__version__, options_first=False)
    debug: bool = args["--debug"]
    setup_logging(debug)

    if not args["serve"]:
        return

    port = args["--port"]
    if port is not None:
        try:
            port = int(port)
            if not 0 < port < 65536:
                raise ValueError(port)
        except ValueError:
            logger.error("port must be an integer between 1 and 65535")
            sys.exit(1)

    config_path: t.Optional[str] = args["--config"]
    try:
        config = Config.load(config_path) if config_path else Config()
    except ConfigurationError as ex:
        logger.error(str(ex))
        sys.exit(1)

    site = StaticSite(
        config,
        root=args["<root>"],
        error_page=args["--error-page"],
        debug=debug,
    )
    site.run(address=args["--address"], port=port)


def setup_logging(debug: bool) -> None:
    """
    Configure logging based on debug mode.

    Args:
        debug: When True, sets logging level to DEBUG; otherwise, sets to INFO
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
