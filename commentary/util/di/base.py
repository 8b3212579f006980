"""Provider metadata shared by all DI providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components tests may swap for a mock implementation
Component = Literal["persistence"]
COMPONENTS: frozenset[Component] = frozenset({"persistence"})


class ProviderBase(Provider):
    """Provider carrying mock-selection metadata.

    A mockable component is declared by a base class that sets
    `__mock_component__`. Its production and mock subclasses differ in
    `__is_mock__`.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
