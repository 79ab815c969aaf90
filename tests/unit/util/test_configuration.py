# pylint: disable=missing-docstring
# pylint: disable=protected-access
import logging
from pathlib import Path
from unittest import mock

import pytest

from headerprep.factory_error import ConfigError, InvalidConfigurationError
from headerprep.processor.field_extractor.processor import FieldExtractor
from headerprep.util.configuration import (
    ConfigGetterException,
    Configuration,
    InvalidConfigurationErrors,
    LoggerConfig,
)
from headerprep.util.defaults import DEFAULT_LOG_CONFIG

path_to_config = "tests/testdata/config/config.yml"
path_to_invalid_config = "tests/testdata/config/config-invalid.yml"
path_to_no_yaml_config = "tests/testdata/config/config-no-yaml.yml"


class TestConfiguration:
    def test_from_source_loads_configuration(self):
        config = Configuration.from_source(path_to_config)
        assert config.version == "1"
        assert config.config_path == path_to_config
        assert config.logger.level == "INFO"
        assert [list(definition.keys())[0] for definition in config.interceptors] == [
            "hdfs_path",
            "host",
        ]

    def test_yaml_escapes_are_resolved(self):
        config = Configuration.from_source(path_to_config)
        assert config.interceptors[0]["hdfs_path"]["delimiter"] == "\t"
        assert config.interceptors[1]["host"]["delimiter"] == r"\s+"

    def test_create_interceptors_keeps_order(self):
        interceptors = Configuration.from_source(path_to_config).create_interceptors()
        assert all(isinstance(interceptor, FieldExtractor) for interceptor in interceptors)
        assert [interceptor.name for interceptor in interceptors] == ["hdfs_path", "host"]

    def test_create_interceptors_passes_diagnostics(self):
        diagnostics = logging.getLogger("test diagnostics")
        config = Configuration.from_source(path_to_config)
        interceptors = config.create_interceptors(diagnostics)
        assert all(interceptor._logger is diagnostics for interceptor in interceptors)

    def test_create_interceptors_does_not_change_definitions(self):
        config = Configuration.from_source(path_to_config)
        config.create_interceptors()
        assert config.interceptors[0]["hdfs_path"]["type"] == "field_extractor"

    def test_from_source_collects_all_errors(self):
        with pytest.raises(InvalidConfigurationErrors) as error:
            Configuration.from_source(path_to_invalid_config)
        assert len(error.value.errors) == 2
        assert all(isinstance(err, ConfigError) for err in error.value.errors)
        assert "malformed field token: '10headerB'" in str(error.value)
        assert "invalid delimiter pattern" in str(error.value)

    def test_from_source_raises_for_missing_file(self):
        with pytest.raises(ConfigGetterException, match="does not exist"):
            Configuration.from_source("tests/testdata/config/does-not-exist.yml")

    def test_from_source_raises_for_invalid_yaml(self):
        with pytest.raises(ConfigGetterException, match="Invalid yaml or json file"):
            Configuration.from_source(path_to_no_yaml_config)

    def test_from_source_raises_for_non_mapping(self, tmp_path: Path):
        config_path = tmp_path / "config.yml"
        config_path.write_text("- just\n- a list\n", encoding="utf8")
        with pytest.raises(InvalidConfigurationError, match="Invalid configuration file"):
            Configuration.from_source(str(config_path))

    def test_from_source_raises_for_unknown_keys(self, tmp_path: Path):
        config_path = tmp_path / "config.yml"
        config_path.write_text("unknown: key\n", encoding="utf8")
        with pytest.raises(InvalidConfigurationError, match="Invalid configuration file"):
            Configuration.from_source(str(config_path))

    def test_from_source_raises_without_interceptors(self, tmp_path: Path):
        config_path = tmp_path / "config.yml"
        config_path.write_text("version: 3\n", encoding="utf8")
        with pytest.raises(InvalidConfigurationErrors, match="No interceptors configured"):
            Configuration.from_source(str(config_path))

    def test_from_source_reports_unknown_component_options(self, tmp_path: Path):
        config_path = tmp_path / "config.yml"
        config_path.write_text(
            "interceptors:\n"
            "  - extractor:\n"
            "      type: field_extractor\n"
            "      delimiter: ':'\n"
            "      headers: '0:a'\n"
            "      unknown: option\n",
            encoding="utf8",
        )
        with pytest.raises(InvalidConfigurationErrors, match="unknown"):
            Configuration.from_source(str(config_path))

    def test_as_dict(self):
        config_dict = Configuration.from_source(path_to_config).as_dict()
        assert config_dict["version"] == "1"
        assert config_dict["logger"]["level"] == "INFO"
        assert "config_path" not in config_dict


class TestLoggerConfig:
    def test_defaults(self):
        assert LoggerConfig().level == "INFO"

    def test_invalid_level_raises(self):
        with pytest.raises(ValueError):
            LoggerConfig(level="LOUD")

    def test_as_dict_config_sets_root_level(self):
        log_config = LoggerConfig(level="DEBUG").as_dict_config()
        assert log_config["loggers"]["root"]["level"] == "DEBUG"
        assert DEFAULT_LOG_CONFIG["loggers"]["root"]["level"] == "INFO"

    def test_as_dict_config_sets_format(self):
        log_config = LoggerConfig(format="%(hostname)s %(message)s", datefmt="%H").as_dict_config()
        assert log_config["formatters"]["headerprep"]["format"] == "%(hostname)s %(message)s"
        assert log_config["formatters"]["headerprep"]["datefmt"] == "%H"

    def test_as_dict_config_adds_loggers(self):
        log_config = LoggerConfig(
            loggers={"FieldExtractor": {"level": "ERROR"}}
        ).as_dict_config()
        assert log_config["loggers"]["FieldExtractor"] == {"level": "ERROR"}
        assert "root" in log_config["loggers"]

    def test_setup_logging_applies_dict_config(self):
        logger_config = LoggerConfig(level="DEBUG", loggers={"FieldExtractor": {"level": "ERROR"}})
        with mock.patch("headerprep.util.configuration.dictConfig") as mock_dict_config:
            logger_config.setup_logging()
        mock_dict_config.assert_called_once_with(logger_config.as_dict_config())
