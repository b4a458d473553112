"""Custom home builder wizard.

The wizard owns one HomeConfiguration and walks it through five fixed steps.
Every edit updates the record in place, asks the estimator for a fresh price
and writes a snapshot to the session-scoped persistence slot, so a reload
mid-wizard restores the exact state.

Collaborators are passed in explicitly:

- ``store`` implements ``load(key)``, ``save(key, blob)`` and ``clear(key)``.
- ``estimator`` implements ``estimate(config) -> int``.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol

from buildmyhome.domain.enums import MaterialCategory, WizardStep
from buildmyhome.domain.estimation import estimate_cost, has_estimate_inputs
from buildmyhome.domain.home_configuration import (
    ConfigurationError,
    DesignChoices,
    HomeConfiguration,
    InteriorChoices,
    parse_appliances,
    parse_materials,
)


logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_KEY = 'homeBuilderDetails'


class PersistenceSlot(Protocol):
    def load(self, key: str) -> Optional[dict]: ...

    def save(self, key: str, blob: dict) -> None: ...

    def clear(self, key: str) -> None: ...


class Estimator(Protocol):
    def estimate(self, config: HomeConfiguration) -> int: ...


class StepBlocked(Exception):
    """A transition was requested before its precondition holds."""

    def __init__(self, step: str, reason: str):
        super().__init__(reason)
        self.step = step
        self.reason = reason


@dataclass(frozen=True)
class EstimateTicket:
    sequence: int
    generation: int


Listener = Callable[[HomeConfiguration], None]


class BuilderWizard:
    def __init__(self, store: PersistenceSlot, estimator: Estimator, *, key: str = DEFAULT_SNAPSHOT_KEY):
        self._store = store
        self._estimator = estimator
        self._key = key
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()
        self._sequence = 0
        self._applied_sequence = 0
        self.generation = 0
        self.step = WizardStep.BASICS
        self.config = self._initial_configuration()
        self._restore()

    # ---- persistence ----

    @staticmethod
    def _initial_configuration() -> HomeConfiguration:
        config = HomeConfiguration()
        config.estimated_cost_rupees = estimate_cost(config)
        return config

    def snapshot(self) -> dict:
        return {
            'config': self.config.to_dict(),
            'step': self.step,
            'generation': self.generation,
        }

    def _persist(self) -> None:
        self._store.save(self._key, self.snapshot())

    def _restore(self) -> bool:
        blob = self._store.load(self._key)
        if not blob:
            return False
        try:
            config = HomeConfiguration.from_dict(blob['config'])
            step = blob.get('step', WizardStep.BASICS)
            if step not in WizardStep.ORDER:
                raise ConfigurationError('step', f'Unknown step {step!r}')
            generation = int(blob.get('generation', 0))
        except (ConfigurationError, KeyError, TypeError, ValueError) as exc:
            logger.warning('Discarding unreadable builder snapshot: %s', exc)
            self._store.clear(self._key)
            return False

        self.config = config
        self.step = step
        self.generation = generation
        return True

    # ---- observers ----

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.config)

    # ---- step transitions ----

    def blocking_reason(self) -> Optional[str]:
        """Why Next is unavailable on the current step, or None."""
        if self.step == WizardStep.BASICS:
            if not self.config.land_area_sqft:
                return 'Enter the land area to continue.'
        elif self.step == WizardStep.MATERIALS:
            missing = self.missing_materials()
            if missing:
                return f"Select materials for: {', '.join(missing)}."
        elif self.step == WizardStep.SUMMARY:
            return 'This is the last step.'
        return None

    def can_advance(self) -> bool:
        return self.blocking_reason() is None

    def missing_materials(self) -> list[str]:
        return [c for c in MaterialCategory.REQUIRED if not self.config.materials.get(c)]

    def next(self, step_fields: Optional[Mapping[str, Any]] = None) -> str:
        """Advance one step, committing the current step's own fields first.

        ``step_fields`` carries the Design or Interiors selections; they are
        validated together and written as one update. Leaving an untouched Design or
        Interiors step commits the defaults it shows.
        """
        step_fields = step_fields or {}

        if self.step == WizardStep.DESIGN:
            design = self._merged_design(step_fields)
            if not design.is_complete():
                raise StepBlocked(self.step, 'Choose a floor plan, ceiling height and window style.')
            self.config.design = design
        elif self.step == WizardStep.INTERIORS:
            interior_type, interiors = self._merged_interiors(step_fields)
            self.config.interior_type = interior_type
            self.config.interiors = interiors
        else:
            reason = self.blocking_reason()
            if reason:
                raise StepBlocked(self.step, reason)

        self.step = WizardStep.following(self.step)
        self._persist()
        if step_fields:
            self.request_estimate()
        return self.step

    def back(self) -> str:
        """Return to the preceding step; a no-op on the first step."""
        previous = WizardStep.preceding(self.step)
        if previous is None:
            return self.step
        self.step = previous
        self._persist()
        return self.step

    # ---- field edits ----

    def update(self, changes: Mapping[str, Any]) -> HomeConfiguration:
        """Apply scalar field edits (land area, floors, rooms, style, budget, interior tier)."""
        self.config.apply_changes(changes)
        self._after_edit()
        return self.config

    def update_design(self, changes: Mapping[str, Any]) -> HomeConfiguration:
        self.config.design = self._merged_design(changes)
        self._after_edit()
        return self.config

    def select_material(self, category: str, item: Optional[str]) -> HomeConfiguration:
        selected = dict(self.config.materials)
        selected[category] = item
        self.config.materials = parse_materials(selected)
        self._after_edit()
        return self.config

    def update_materials(self, selections: Mapping[str, Any]) -> HomeConfiguration:
        if not isinstance(selections, Mapping):
            raise ConfigurationError('materials', 'Expected an object')
        merged = dict(self.config.materials)
        merged.update(selections)
        self.config.materials = parse_materials(merged)
        self._after_edit()
        return self.config

    def update_interiors(self, changes: Mapping[str, Any]) -> HomeConfiguration:
        self.config.interior_type, self.config.interiors = self._merged_interiors(changes)
        self._after_edit()
        return self.config

    def _merged_design(self, changes: Mapping[str, Any]) -> DesignChoices:
        current = (self.config.design or DesignChoices()).to_dict()
        current.update({k: v for k, v in changes.items() if k in current})
        return DesignChoices.from_dict(current)

    def _merged_interiors(self, changes: Mapping[str, Any]) -> tuple[Optional[str], InteriorChoices]:
        interiors = self.config.interiors or InteriorChoices()
        merged = interiors.to_dict()
        merged.update({k: v for k, v in changes.items() if k in merged})
        parsed = InteriorChoices.from_dict(merged)

        interior_type = self.config.interior_type
        if 'interiorType' in changes:
            candidate = self.config.copy()
            candidate.apply_changes({'interiorType': changes['interiorType']})
            interior_type = candidate.interior_type
        return interior_type, parsed

    def toggle_appliance(self, appliance: str) -> HomeConfiguration:
        interiors = self.config.interiors or InteriorChoices()
        current = set(interiors.appliances)
        current ^= parse_appliances([appliance])
        self.config.interiors = InteriorChoices(lighting_quality=interiors.lighting_quality, appliances=current)
        self._after_edit()
        return self.config

    def _after_edit(self) -> None:
        self._persist()
        self.request_estimate()

    # ---- lifecycle ----

    def reset(self) -> None:
        """Start fresh: defaults, first step, and an empty persistence slot."""
        with self._lock:
            self.generation += 1
            self._applied_sequence = self._sequence
        self.config = self._initial_configuration()
        self.step = WizardStep.BASICS
        self._store.clear(self._key)
        self._notify()

    def start_from_package(self, *, size: int, bedrooms: int, bathrooms: int, style: str) -> HomeConfiguration:
        """Reset, then seed the basics from a catalog package."""
        self.reset()
        changes = {'landAreaSqFt': size, 'bedrooms': bedrooms, 'bathrooms': bathrooms}
        try:
            self.config.apply_changes({'houseType': (style or '').lower()})
        except ConfigurationError:
            logger.info('Package style %r is not a builder house type; keeping %s', style, self.config.house_type)
        self.update(changes)
        return self.config

    # ---- estimation ----

    def request_estimate(self, executor=None):
        """Recompute the estimate for the live configuration.

        Returns None when the precondition fails. Synchronously returns the
        ticket once applied; with an executor, returns the pending future.
        """
        if not has_estimate_inputs(self.config):
            logger.debug('Estimate skipped: land area, floors or house type missing')
            return None

        with self._lock:
            self._sequence += 1
            ticket = EstimateTicket(sequence=self._sequence, generation=self.generation)
        target = self.config.copy()

        if executor is None:
            self.deliver_estimate(ticket, self._safe_estimate(target))
            return ticket

        future = executor.submit(self._safe_estimate, target)
        future.add_done_callback(lambda done: self.deliver_estimate(ticket, done.result()))
        return future

    def _safe_estimate(self, config: HomeConfiguration) -> int:
        try:
            return int(self._estimator.estimate(config))
        except Exception:
            logger.warning('Estimator failed unexpectedly; using local formula', exc_info=True)
            return estimate_cost(config)

    def deliver_estimate(self, ticket: EstimateTicket, value: int) -> bool:
        """Adopt an estimate unless a newer one or a reset superseded it."""
        with self._lock:
            if ticket.generation != self.generation or ticket.sequence <= self._applied_sequence:
                logger.debug('Discarding stale estimate #%s (gen %s)', ticket.sequence, ticket.generation)
                return False
            self._applied_sequence = ticket.sequence
            self.config.estimated_cost_rupees = value
        self._persist()
        self._notify()
        return True
