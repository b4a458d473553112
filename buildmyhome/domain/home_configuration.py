"""The home configuration record built by the custom home builder.

The record is the single mutable object the wizard works on. It serialises to
the camelCase JSON shape shared by the estimation endpoint, the session
snapshot, saved plans and inquiry attachments.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from buildmyhome.domain.enums import (
    Appliance,
    BudgetRange,
    CeilingHeight,
    FloorPlan,
    HouseType,
    InteriorType,
    LightingQuality,
    MaterialCategory,
    WindowStyle,
)


MIN_LAND_AREA_SQFT = 100
MAX_LAND_AREA_SQFT = 1_000_000
MIN_FLOORS = 1
MAX_FLOORS = 10

DEFAULT_LAND_AREA_SQFT = 1000
DEFAULT_FLOORS = 1
DEFAULT_BEDROOMS = 2
DEFAULT_BATHROOMS = 2
DEFAULT_HOUSE_TYPE = HouseType.MODERN
DEFAULT_BUDGET_RANGE = '20-30'
DEFAULT_INTERIOR_TYPE = InteriorType.BASIC


class ConfigurationError(ValueError):
    """A configuration field holds a value outside its domain."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f'{field_name}: {message}')
        self.field = field_name
        self.message = message


def _parse_int(field_name: str, value: Any, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(field_name, 'Expected a whole number')
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigurationError(field_name, 'Expected a whole number')
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ConfigurationError(field_name, 'Expected a whole number') from None
    elif not isinstance(value, int):
        raise ConfigurationError(field_name, 'Expected a whole number')

    if minimum is not None and value < minimum:
        raise ConfigurationError(field_name, f'Must be at least {minimum}')
    if maximum is not None and value > maximum:
        raise ConfigurationError(field_name, f'Must be at most {maximum}')
    return value


def _parse_choice(field_name: str, value: Any, choices: tuple) -> str:
    if value not in choices:
        raise ConfigurationError(field_name, f"Must be one of: {', '.join(str(c) for c in choices)}")
    return value


@dataclass
class DesignChoices:
    floor_plan: str = FloorPlan.OPEN
    ceiling_height: str = CeilingHeight.STANDARD
    window_style: str = WindowStyle.STANDARD

    def is_complete(self) -> bool:
        return bool(self.floor_plan and self.ceiling_height and self.window_style)

    def to_dict(self) -> dict:
        return {
            'floorPlan': self.floor_plan,
            'ceilingHeight': self.ceiling_height,
            'windowStyle': self.window_style,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'DesignChoices':
        if not isinstance(data, Mapping):
            raise ConfigurationError('design', 'Expected an object')
        return cls(
            floor_plan=_parse_choice('design.floorPlan', data.get('floorPlan', FloorPlan.OPEN), FloorPlan.ALL),
            ceiling_height=_parse_choice(
                'design.ceilingHeight', data.get('ceilingHeight', CeilingHeight.STANDARD), CeilingHeight.ALL
            ),
            window_style=_parse_choice(
                'design.windowStyle', data.get('windowStyle', WindowStyle.STANDARD), WindowStyle.ALL
            ),
        )


@dataclass
class InteriorChoices:
    lighting_quality: int = LightingQuality.BASIC
    appliances: set[str] = field(default_factory=set)

    def to_dict(self) -> dict:
        return {
            'lightingQuality': self.lighting_quality,
            'appliances': sorted(self.appliances),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'InteriorChoices':
        if not isinstance(data, Mapping):
            raise ConfigurationError('interiors', 'Expected an object')
        lighting = _parse_int(
            'interiors.lightingQuality',
            data.get('lightingQuality', LightingQuality.BASIC),
            minimum=LightingQuality.BASIC,
            maximum=LightingQuality.PREMIUM,
        )
        return cls(lighting_quality=lighting, appliances=parse_appliances(data.get('appliances') or ()))


def parse_appliances(values: Any) -> set[str]:
    if isinstance(values, (str, bytes)) or not hasattr(values, '__iter__'):
        raise ConfigurationError('interiors.appliances', 'Expected a list of appliances')
    return {_parse_choice('interiors.appliances', item, Appliance.ALL) for item in values}


def parse_materials(data: Any) -> dict[str, str]:
    if not isinstance(data, Mapping):
        raise ConfigurationError('materials', 'Expected an object')
    selected: dict[str, str] = {}
    for category, item in data.items():
        _parse_choice('materials', category, MaterialCategory.ALL)
        if item is None or item == '':
            continue
        if isinstance(item, bool) or not isinstance(item, (str, int)):
            raise ConfigurationError(f'materials.{category}', 'Expected a material identifier')
        selected[category] = str(item)
    return selected


# camelCase key -> (attribute, parser). Shared by field edits and snapshots.
_SCALAR_FIELDS = {
    'landAreaSqFt': (
        'land_area_sqft',
        lambda v: _parse_int('landAreaSqFt', v, minimum=0, maximum=MAX_LAND_AREA_SQFT),
    ),
    'floors': ('floors', lambda v: _parse_int('floors', v, minimum=MIN_FLOORS, maximum=MAX_FLOORS)),
    'bedrooms': ('bedrooms', lambda v: _parse_int('bedrooms', v, minimum=1)),
    'bathrooms': ('bathrooms', lambda v: _parse_int('bathrooms', v, minimum=1)),
    'houseType': ('house_type', lambda v: _parse_choice('houseType', v, HouseType.ALL)),
    'budgetRange': ('budget_range', lambda v: _parse_choice('budgetRange', v, BudgetRange.ALL)),
    'interiorType': (
        'interior_type',
        lambda v: None if v is None else _parse_choice('interiorType', v, InteriorType.ALL),
    ),
}

EDITABLE_FIELDS = tuple(_SCALAR_FIELDS)

# Required by the authoritative estimation endpoint.
ESTIMATE_REQUIRED_FIELDS = ('landAreaSqFt', 'floors', 'bedrooms', 'bathrooms', 'houseType')


@dataclass
class HomeConfiguration:
    land_area_sqft: int = DEFAULT_LAND_AREA_SQFT
    floors: int = DEFAULT_FLOORS
    bedrooms: int = DEFAULT_BEDROOMS
    bathrooms: int = DEFAULT_BATHROOMS
    house_type: str = DEFAULT_HOUSE_TYPE
    budget_range: Optional[str] = DEFAULT_BUDGET_RANGE
    design: Optional[DesignChoices] = None
    materials: dict[str, str] = field(default_factory=dict)
    interior_type: Optional[str] = DEFAULT_INTERIOR_TYPE
    interiors: Optional[InteriorChoices] = None
    estimated_cost_rupees: int = 0

    def copy(self) -> 'HomeConfiguration':
        return copy.deepcopy(self)

    def apply_changes(self, changes: Mapping[str, Any]) -> list[str]:
        """Validate and apply scalar field edits in place.

        All values are validated before any is written, so a rejected edit
        leaves the record untouched. Returns the keys that were applied.
        """
        parsed = {}
        for key, value in changes.items():
            if key not in _SCALAR_FIELDS:
                raise ConfigurationError(key, 'Field cannot be edited directly')
            attr, parser = _SCALAR_FIELDS[key]
            parsed[attr] = parser(value)

        for attr, value in parsed.items():
            setattr(self, attr, value)
        return list(changes)

    def plan_identity(self) -> tuple:
        """Key under which two saved custom plans count as the same plan."""
        return (self.land_area_sqft, self.floors, self.house_type)

    def to_estimate_payload(self) -> dict:
        payload = {
            'landAreaSqFt': self.land_area_sqft,
            'floors': self.floors,
            'bedrooms': self.bedrooms,
            'bathrooms': self.bathrooms,
            'houseType': self.house_type,
        }
        if self.budget_range:
            payload['budgetRange'] = self.budget_range
        if self.interior_type:
            payload['interiorType'] = self.interior_type
        if self.materials:
            payload['materials'] = dict(self.materials)
        return payload

    def to_dict(self) -> dict:
        data = self.to_estimate_payload()
        data['budgetRange'] = self.budget_range
        data['interiorType'] = self.interior_type
        data['materials'] = dict(self.materials)
        data['design'] = self.design.to_dict() if self.design else None
        data['interiors'] = self.interiors.to_dict() if self.interiors else None
        data['estimatedCostRupees'] = self.estimated_cost_rupees
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'HomeConfiguration':
        """Rebuild a record from a snapshot; missing keys take their defaults."""
        if not isinstance(data, Mapping):
            raise ConfigurationError('configuration', 'Expected an object')

        config = cls()
        config.apply_changes({key: data[key] for key in EDITABLE_FIELDS if key in data})
        if data.get('design') is not None:
            config.design = DesignChoices.from_dict(data['design'])
        if data.get('materials') is not None:
            config.materials = parse_materials(data['materials'])
        if data.get('interiors') is not None:
            config.interiors = InteriorChoices.from_dict(data['interiors'])
        if data.get('estimatedCostRupees') is not None:
            config.estimated_cost_rupees = _parse_int('estimatedCostRupees', data['estimatedCostRupees'], minimum=0)
        return config

    @classmethod
    def from_estimate_payload(cls, data: Any) -> 'HomeConfiguration':
        """Strict parse of a request to the authoritative estimation endpoint."""
        if not isinstance(data, Mapping):
            raise ConfigurationError('body', 'Expected a JSON object')
        for key in ESTIMATE_REQUIRED_FIELDS:
            if data.get(key) is None:
                raise ConfigurationError(key, 'Required')

        config = cls(budget_range=None, interior_type=None)
        config.apply_changes({key: data[key] for key in EDITABLE_FIELDS if data.get(key) is not None})
        if config.land_area_sqft < MIN_LAND_AREA_SQFT:
            raise ConfigurationError('landAreaSqFt', f'Must be at least {MIN_LAND_AREA_SQFT}')
        if data.get('materials') is not None:
            config.materials = parse_materials(data['materials'])
        return config
