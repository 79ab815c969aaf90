""" validators to use with `attrs` fields"""

import codecs

from headerprep.factory_error import InvalidConfigurationError


def encoding_validator(_, attribute, value):
    """validate if an attribute names a codec known to python"""
    if not isinstance(value, str):
        raise InvalidConfigurationError(f"{attribute.name} is not a str")
    try:
        codecs.lookup(value)
    except LookupError as error:
        raise InvalidConfigurationError(
            f"{attribute.name} '{value}' is not a known encoding"
        ) from error
