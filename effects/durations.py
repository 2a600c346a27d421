"""
Effect duration policy: maps an effect kind to its simulated render time.

The scheduler asks the policy once per job as it enters processing. The
policy is a plain lookup table so it can be swapped out (tests use tiny or
custom tables, production reads EFFECT_DURATIONS_MS from settings) without
touching the scheduler.

Same idea as a job handler registry: one place that knows every effect, and
an unknown effect is an InvalidEffectError, never a KeyError deep inside
the worker loop.
"""

from typing import Mapping, Union

from config.settings import settings
from models.enums import EffectType
from models.errors import InvalidEffectError


def coerce_effect(effect: Union[EffectType, str]) -> EffectType:
    """Turn a raw string into an EffectType, raising InvalidEffectError if it isn't one."""
    if isinstance(effect, EffectType):
        return effect
    try:
        return EffectType(effect)
    except ValueError:
        raise InvalidEffectError(effect) from None


class DurationPolicy:

    def __init__(self, durations_ms: Mapping[Union[EffectType, str], int]):
        table: dict[EffectType, int] = {}
        for effect, duration in durations_ms.items():
            if duration < 0:
                raise ValueError(f"Duration for '{effect}' must be >= 0, got {duration}")
            table[coerce_effect(effect)] = int(duration)
        self._durations = table

    def __contains__(self, effect) -> bool:
        try:
            return coerce_effect(effect) in self._durations
        except InvalidEffectError:
            return False

    def __call__(self, effect: Union[EffectType, str]) -> int:
        return self.duration_for(effect)

    def duration_for(self, effect: Union[EffectType, str]) -> int:
        """Simulated render time in milliseconds. Raises InvalidEffectError if unknown."""
        kind = coerce_effect(effect)
        duration = self._durations.get(kind)
        if duration is None:
            raise InvalidEffectError(kind.value)
        return duration

    @property
    def effects(self) -> list[EffectType]:
        return list(self._durations)


def default_duration_policy() -> DurationPolicy:
    """Build the policy from settings.EFFECT_DURATIONS_MS."""
    return DurationPolicy(settings.EFFECT_DURATIONS_MS)
