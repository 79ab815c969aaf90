# pylint: disable=missing-docstring
import pytest

from headerprep.processor.field_extractor.processor import FieldExtractor
from headerprep.registry import Registry


class TestRegistry:
    def test_get_class(self):
        expected_class = FieldExtractor
        assert Registry.get_class("field_extractor") == expected_class

    def test_get_class_raises(self):
        with pytest.raises(ValueError, match="Unknown interceptor type"):
            Registry.get_class("i do not exist")
