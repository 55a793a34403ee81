"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a mock implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider family that sets ``__mock_component__`` is mockable: it has
    one production subclass and one subclass with ``__is_mock__ = True``.
    Concrete providers leave both at their defaults.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def component_name(cls) -> str:
        """Name used when reporting on this provider family."""
        return cls.__mock_component__ or cls.__name__
