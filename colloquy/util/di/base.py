"""Provider base shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider that sets ``__mock_component__`` is a component base: its
    production and mock variants subclass it and set ``__is_mock__``.
    Providers without subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, use_mock: bool) -> type["ProviderBase"]:
        """Pick the variant of this provider to instantiate.

        Raises:
            LookupError: If the requested variant isn't registered (mock
                variants register when ``tests.di`` is imported)
        """
        variants = cls.__subclasses__()
        if not variants:
            return cls

        for variant in variants:
            if variant.__is_mock__ == use_mock:
                return variant

        kind = "mock" if use_mock else "production"
        raise LookupError(f"No {kind} provider registered for {cls.__mock_component__}")
