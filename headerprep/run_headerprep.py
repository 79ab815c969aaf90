# pylint: disable=logging-fstring-interpolation
"""This module can be used to verify and dry run headerprep configurations."""
import logging
import logging.config
import sys

import click
from colorama import Fore

from headerprep.util.configuration import Configuration, InvalidConfigurationError
from headerprep.util.defaults import DEFAULT_LOG_CONFIG, EXITCODES
from headerprep.util.dry_runner import DryRunner
from headerprep.util.helper import get_versions_string, print_fcolor

logging.captureWarnings(True)
logging.config.dictConfig(DEFAULT_LOG_CONFIG)
logger = logging.getLogger("headerprep")


def _get_configuration(config_path: str) -> Configuration:
    try:
        config = Configuration.from_source(config_path)
        config.logger.setup_logging()
        logger.debug(f"Log level set to '{config.logger.level}'")
        return config
    except InvalidConfigurationError as error:
        print(f"InvalidConfigurationError: {error}", file=sys.stderr)
        sys.exit(EXITCODES.CONFIGURATION_ERROR.value)


@click.group(name="headerprep")
@click.version_option(version=get_versions_string(), message="%(version)s")
def cli() -> None:
    """
    Headerprep extracts positional fields of delimited log records into event headers.
    """


@cli.group(name="test", short_help="Execute tests against a given configuration")
def test() -> None:
    """
    Verify a configuration or dry run it against a set of records.
    """


@test.command(name="config")
@click.argument("config")
def test_config(config: str) -> None:
    """
    Verify the configuration file

    CONFIG is a path to a configuration file.
    """
    _get_configuration(config)
    print_fcolor(Fore.GREEN, "The verification of the configuration was successful")


@test.command(short_help="Execute a dry run against a configuration and selected records")
@click.argument("config")
@click.argument("records")
def dry_run(config: str, records: str) -> None:
    """
    Execute a dry run with the given configuration against a set of records. The extracted
    headers will be printed in the terminal.

    \b
    CONFIG is a path to a configuration file.
    RECORDS is a path to a text file with one record per line.
    """
    configuration = _get_configuration(config)
    try:
        DryRunner(records, configuration).run()
    except OSError as error:
        logger.critical(f"Could not read records: {error}")
        sys.exit(EXITCODES.ERROR.value)


def main():
    """entrypoint of the headerprep command line interface"""
    cli(prog_name="headerprep")


if __name__ == "__main__":
    main()
