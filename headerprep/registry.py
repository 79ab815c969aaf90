"""module for interceptor registry
it is used to check if an interceptor is known to the system.
you have to register new interceptors here by import them and add to `Registry.mapping`
"""

from typing import Dict, Type

from headerprep.abc.interceptor import Interceptor
from headerprep.processor.field_extractor.processor import FieldExtractor


class Registry:
    """Component Registry"""

    mapping: Dict[str, Type[Interceptor]] = {
        "field_extractor": FieldExtractor,
    }

    @classmethod
    def get_class(cls, component_type: str) -> Type[Interceptor]:
        """return the interceptor class for a given type

        Parameters
        ----------
        component_type : str
            the interceptor type

        Returns
        -------
        Type[Interceptor]
            the registered interceptor class

        Raises
        ------
        ValueError
            if the type is unknown
        """
        component_class = cls.mapping.get(component_type)
        if component_class is None:
            raise ValueError(f"Unknown interceptor type: {component_type}")
        return component_class
