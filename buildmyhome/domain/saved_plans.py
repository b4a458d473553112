"""Saved plans: favorited catalog packages and custom builder results."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from buildmyhome.domain.home_configuration import ConfigurationError, HomeConfiguration


@dataclass(frozen=True)
class SavedPlanEntry:
    """Either a stock package reference or a custom configuration, never both."""

    package_id: Optional[int] = None
    custom_package: Optional[HomeConfiguration] = None

    def __post_init__(self):
        if (self.package_id is None) == (self.custom_package is None):
            raise ConfigurationError('savedPlan', 'Provide either packageId or customPackage')

    @property
    def is_custom(self) -> bool:
        return self.custom_package is not None

    def same_plan(self, other: 'SavedPlanEntry') -> bool:
        if self.is_custom and other.is_custom:
            return self.custom_package.plan_identity() == other.custom_package.plan_identity()
        if not self.is_custom and not other.is_custom:
            return self.package_id == other.package_id
        return False

    def to_dict(self) -> dict:
        if self.is_custom:
            return {'customPackage': self.custom_package.to_dict()}
        return {'packageId': self.package_id}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SavedPlanEntry':
        if not isinstance(data, Mapping):
            raise ConfigurationError('savedPlan', 'Expected an object')
        custom = data.get('customPackage')
        if custom is not None:
            return cls(custom_package=HomeConfiguration.from_dict(custom))
        package_id = data.get('packageId')
        if isinstance(package_id, bool) or not isinstance(package_id, (int, str)):
            raise ConfigurationError('packageId', 'Provide either packageId or customPackage')
        try:
            return cls(package_id=int(package_id))
        except ValueError:
            raise ConfigurationError('packageId', 'Expected a package id') from None


class SavedPlanList:
    """Ordered, de-duplicated list of saved plans."""

    def __init__(self, entries: Iterable[SavedPlanEntry] = ()):
        self.entries: list[SavedPlanEntry] = list(entries)

    def __len__(self) -> int:
        return len(self.entries)

    def contains(self, entry: SavedPlanEntry) -> bool:
        return any(existing.same_plan(entry) for existing in self.entries)

    def add(self, entry: SavedPlanEntry) -> bool:
        """Append the entry; False when the same plan is already saved."""
        if self.contains(entry):
            return False
        self.entries.append(entry)
        return True

    def remove(self, index: int) -> Optional[SavedPlanEntry]:
        if index < 0 or index >= len(self.entries):
            return None
        return self.entries.pop(index)

    def clear(self) -> None:
        self.entries.clear()

    def to_list(self) -> list[dict]:
        return [entry.to_dict() for entry in self.entries]

    @classmethod
    def from_list(cls, items: Optional[Iterable[Mapping[str, Any]]]) -> 'SavedPlanList':
        return cls(SavedPlanEntry.from_dict(item) for item in (items or ()))
