from __future__ import annotations


class HouseType:
    MODERN = 'modern'
    TRADITIONAL = 'traditional'
    CONTEMPORARY = 'contemporary'
    MINIMALIST = 'minimalist'

    ALL = (MODERN, TRADITIONAL, CONTEMPORARY, MINIMALIST)


class InteriorType:
    BASIC = 'basic'
    PREMIUM = 'premium'
    LUXURY = 'luxury'

    ALL = (BASIC, PREMIUM, LUXURY)


class BudgetRange:
    """Budget bands in lakhs of rupees. Advisory only."""

    ALL = ('15-20', '20-30', '30-50', '50-75', '75-100', '100+')


class FloorPlan:
    OPEN = 'open'
    TRADITIONAL = 'traditional'
    HYBRID = 'hybrid'

    ALL = (OPEN, TRADITIONAL, HYBRID)


class CeilingHeight:
    STANDARD = 'standard'
    HIGH = 'high'
    VAULTED = 'vaulted'

    ALL = (STANDARD, HIGH, VAULTED)


class WindowStyle:
    STANDARD = 'standard'
    LARGE = 'large'
    PANORAMIC = 'panoramic'

    ALL = (STANDARD, LARGE, PANORAMIC)


class MaterialCategory:
    FLOORING = 'flooring'
    WALLS = 'walls'
    KITCHEN = 'kitchen'
    BATHROOM = 'bathroom'
    DOORS = 'doors'
    WINDOWS = 'windows'

    ALL = (FLOORING, WALLS, KITCHEN, BATHROOM, DOORS, WINDOWS)

    # Windows is optional in the builder's materials step.
    REQUIRED = (FLOORING, WALLS, KITCHEN, BATHROOM, DOORS)


class Appliance:
    AC = 'ac'
    REFRIGERATOR = 'refrigerator'
    WASHER = 'washer'
    MICROWAVE = 'microwave'
    DISHWASHER = 'dishwasher'
    WATER_HEATER = 'waterHeater'

    ALL = (AC, REFRIGERATOR, WASHER, MICROWAVE, DISHWASHER, WATER_HEATER)


class LightingQuality:
    BASIC = 1
    STANDARD = 2
    PREMIUM = 3

    ALL = (BASIC, STANDARD, PREMIUM)


class WizardStep:
    """Ordered stages of the custom home builder."""

    BASICS = 'basics'
    DESIGN = 'design'
    MATERIALS = 'materials'
    INTERIORS = 'interiors'
    SUMMARY = 'summary'

    ORDER = (BASICS, DESIGN, MATERIALS, INTERIORS, SUMMARY)

    @classmethod
    def index(cls, step: str) -> int:
        return cls.ORDER.index(step)

    @classmethod
    def following(cls, step: str) -> str | None:
        idx = cls.index(step)
        return cls.ORDER[idx + 1] if idx + 1 < len(cls.ORDER) else None

    @classmethod
    def preceding(cls, step: str) -> str | None:
        idx = cls.index(step)
        return cls.ORDER[idx - 1] if idx > 0 else None
