"""
Configuration
=============

The headerprep configuration is a yaml or json file that describes the logging and an
ordered chain of interceptors. Every event passes the interceptors in the given order.

..  code-block:: yaml
    :caption: Example of a complete configuration

    version: 1
    logger:
      level: INFO
    interceptors:
      - hdfs_path:
          type: field_extractor
          delimiter: "\\t"
          headers: "0:headerA, 2:headerB"

The configuration is verified on load by building every interceptor once.
All configuration errors are collected and reported together.
"""

import logging
from copy import deepcopy
from logging.config import dictConfig
from pathlib import Path
from typing import List

from attrs import asdict, define, field, validators
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from headerprep.abc.interceptor import Interceptor
from headerprep.factory import Factory
from headerprep.factory_error import InvalidConfigurationError
from headerprep.util.defaults import DEFAULT_LOG_CONFIG, DEFAULT_LOG_LEVEL

logger = logging.getLogger("Config")

yaml = YAML(typ="safe", pure=True)


class InvalidConfigurationErrors(InvalidConfigurationError):
    """Raise for multiple Configuration related exceptions."""

    errors: List[InvalidConfigurationError]

    def __init__(self, errors: List[Exception]) -> None:
        unique_errors = []
        for error in errors:
            if not isinstance(error, InvalidConfigurationError):
                error = InvalidConfigurationError(*error.args)
            if error not in unique_errors:
                unique_errors.append(error)
        self.errors = unique_errors
        super().__init__("\n".join([str(error) for error in self.errors]))


class ConfigGetterException(InvalidConfigurationError):
    """Raise if the configuration file can't be read."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


@define(kw_only=True)
class LoggerConfig:
    """The logger config class used in Configuration.
    The schema for this class is derived from the python logging module:
    https://docs.python.org/3/library/logging.config.html#dictionary-schema-details
    """

    _LOG_LEVELS = (
        logging.NOTSET,  # 0
        logging.DEBUG,  # 10
        logging.INFO,  # 20
        logging.WARNING,  # 30
        logging.ERROR,  # 40
        logging.CRITICAL,  # 50
    )

    level: str = field(
        default=DEFAULT_LOG_LEVEL,
        validator=[
            validators.instance_of(str),
            validators.in_([logging.getLevelName(level) for level in _LOG_LEVELS]),
        ],
    )
    """The log level of the root logger. Defaults to :code:`INFO`."""
    format: str = field(default="", validator=validators.instance_of(str))
    """The format of the log message as supported by the :code:`HeaderprepFormatter`."""
    datefmt: str = field(default="", validator=validators.instance_of(str))
    """The date format of the log message. Defaults to :code:`"%Y-%m-%d %H:%M:%S"`."""
    loggers: dict = field(validator=validators.instance_of(dict), factory=dict)
    """The log levels of single loggers, e.g. :code:`{"FieldExtractor": {"level": "ERROR"}}`"""

    def as_dict_config(self) -> dict:
        """Merge this configuration into the default dict config."""
        log_config = deepcopy(DEFAULT_LOG_CONFIG)
        formatter = log_config["formatters"]["headerprep"]
        if self.format:
            formatter["format"] = self.format
        if self.datefmt:
            formatter["datefmt"] = self.datefmt
        log_config["loggers"] = log_config["loggers"] | deepcopy(self.loggers)
        log_config["loggers"]["root"] = {**DEFAULT_LOG_CONFIG["loggers"]["root"]}
        log_config["loggers"]["root"]["level"] = self.level
        return log_config

    def setup_logging(self) -> None:
        """Setup the logging configuration.
        is called in the :code:`headerprep.run_headerprep` module.
        """
        dictConfig(self.as_dict_config())


@define(kw_only=True)
class Configuration:
    """the configuration class"""

    version: str = field(validator=validators.instance_of(str), converter=str, default="unset")
    """The version of the configuration, shown by :code:`headerprep --version`."""
    logger: LoggerConfig = field(
        validator=validators.instance_of(LoggerConfig),
        converter=lambda x: LoggerConfig(**x) if isinstance(x, dict) else x,
        factory=LoggerConfig,
    )
    """Logger configuration, see :class:`LoggerConfig`."""
    interceptors: list = field(
        validator=[
            validators.instance_of(list),
            validators.deep_iterable(member_validator=validators.instance_of(dict)),
        ],
        factory=list,
    )
    """Ordered list of interceptor definitions. Every element is a mapping from the
    interceptor name to its configuration."""
    config_path: str = field(
        validator=validators.optional(validators.instance_of(str)), default=None
    )
    """The file the configuration was loaded from."""

    @classmethod
    def from_source(cls, config_path: str) -> "Configuration":
        """Create a verified configuration from a yaml or json file.

        Parameters
        ----------
        config_path : str
            path of the file to create the configuration from.

        Returns
        -------
        config : Configuration
            Configuration object attrs class.

        Raises
        ------
        ConfigGetterException
            if the file can't be read or parsed
        InvalidConfigurationError
            if the content of the file is no valid configuration
        """
        try:
            config_dict = yaml.load(Path(config_path).read_text(encoding="utf8"))
        except FileNotFoundError as error:
            raise ConfigGetterException(
                f"The given config file does not exist: {error.filename}"
            ) from error
        except YAMLError as error:
            raise ConfigGetterException(f"Invalid yaml or json file: {config_path}") from error
        if not isinstance(config_dict, dict):
            raise InvalidConfigurationError(f"Invalid configuration file: {config_path}")
        try:
            config = Configuration(**(config_dict | {"config_path": config_path}))
        except (TypeError, ValueError) as error:
            raise InvalidConfigurationError(
                f"Invalid configuration file: {config_path} {error.args[0]}"
            ) from error
        config._verify()
        return config

    def as_dict(self) -> dict:
        """Return the configuration as dict."""
        return asdict(self, filter=lambda attribute, _: attribute.name != "config_path")

    def create_interceptors(self, diagnostics: logging.Logger = None) -> List[Interceptor]:
        """Create the configured interceptor chain in order."""
        return [
            Factory.create(deepcopy(definition), diagnostics) for definition in self.interceptors
        ]

    def _verify(self) -> None:
        errors = []
        if not self.interceptors:
            errors.append(InvalidConfigurationError("No interceptors configured."))
        for definition in self.interceptors:
            try:
                Factory.create(deepcopy(definition))
            except (InvalidConfigurationError, TypeError, ValueError) as error:
                errors.append(error)
        if errors:
            raise InvalidConfigurationErrors(errors)
        logger.debug("Verified %s interceptor definition(s)", len(self.interceptors))
