"""module for component configuration """

from typing import TYPE_CHECKING, Any, Mapping

from headerprep.factory_error import NoTypeSpecifiedError, UnknownComponentTypeError
from headerprep.registry import Registry

if TYPE_CHECKING:  # pragma: no cover
    from headerprep.abc.component import Component


class Configuration:
    """factory and adapter for generating config"""

    @classmethod
    def create(cls, name: str, config_: Mapping[str, Any]) -> "Component.Config":
        """factory method to create component configuration

        Parameters
        ----------
        name: str
            the name of the component
        config_ : Mapping[str, Any]
            the config dict

        Returns
        -------
        Config
            the component configuration
        """
        class_ = cls.get_class(name, config_)
        return class_.Config(**config_)

    @staticmethod
    def get_class(name: str, config_: Mapping[str, Any]):
        """gets the class from config

        Parameters
        ----------
        name : str
            The name of the component
        config_ : Mapping[str, Any]
            the configuration with setted `type`

        Returns
        -------
        Interceptor
            The requested component class

        Raises
        ------
        UnknownComponentTypeError
            if component is not found
        NoTypeSpecifiedError
            if type is not found in config object
        """
        if "type" not in config_:
            raise NoTypeSpecifiedError(name)
        component_type = config_.get("type")
        if component_type not in Registry.mapping:
            raise UnknownComponentTypeError(name, component_type)
        return Registry.get_class(component_type)
