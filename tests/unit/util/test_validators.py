# pylint: disable=missing-docstring
import pytest
from attrs import define, field

from headerprep.factory_error import InvalidConfigurationError
from headerprep.util.validators import encoding_validator


@define
class EncodingConfig:
    encoding: str = field(validator=encoding_validator)


class TestEncodingValidator:
    @pytest.mark.parametrize("encoding", ["utf-8", "UTF8", "latin-1", "cp1252", "ascii"])
    def test_accepts_known_encodings(self, encoding):
        assert EncodingConfig(encoding).encoding == encoding

    def test_rejects_unknown_encoding(self):
        with pytest.raises(InvalidConfigurationError, match="'no-such-codec' is not a known"):
            EncodingConfig("no-such-codec")

    def test_rejects_non_string(self):
        with pytest.raises(InvalidConfigurationError, match="encoding is not a str"):
            EncodingConfig(8)
