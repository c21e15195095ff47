"""Exceptions raised while resolving environment-specific configuration."""

from typing import Iterable, List, Sequence


class ConfigurationError(Exception):
    """Base exception for configuration problems."""

    pass


class UndefinedEnvironmentVariableError(ConfigurationError):
    """A required property has no value for the active environments."""

    def __init__(self, property_name: str, environments: Iterable[str]) -> None:
        self.property_name = property_name
        self.environments: List[str] = list(environments)
        super().__init__(
            f"Environment '{property_name}' property undefined for environment "
            f"'{self.environments}'"
        )


class PropertySubstitutionError(ConfigurationError):
    """A ``#{...}`` reference leads back to a property already being expanded."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle: List[str] = list(cycle)
        self.property_name = self.cycle[0]
        super().__init__(
            f"Property reference cycle while expanding '{self.property_name}': "
            + " -> ".join(self.cycle)
        )


__all__ = [
    "ConfigurationError",
    "UndefinedEnvironmentVariableError",
    "PropertySubstitutionError",
]
