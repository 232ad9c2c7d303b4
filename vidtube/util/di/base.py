"""Provider base class carrying the metadata ``get_provider`` selects on."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with interchangeable real and in-memory implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """A dishka provider that may stand in for a swappable component.

    ``__mock_component__`` names the component on the base provider; the
    in-memory variant subclasses it and sets ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
