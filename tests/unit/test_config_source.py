# pylint: disable=missing-docstring
from headerprep.abc.config_source import ConfigSource, MappingConfigSource


class TestMappingConfigSource:
    def test_returns_values_as_string(self):
        source = MappingConfigSource({"delimiter": ":", "number": 1})
        assert source.get("delimiter") == ":"
        assert source.get("number") == "1"

    def test_returns_none_for_absent_keys(self):
        source = MappingConfigSource({"headers": None})
        assert source.get("headers") is None
        assert source.get("delimiter") is None

    def test_is_config_source(self):
        assert isinstance(MappingConfigSource({}), ConfigSource)

    def test_dict_is_config_source(self):
        assert isinstance({}, ConfigSource)
