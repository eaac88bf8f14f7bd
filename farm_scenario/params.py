"""
Scenario input parameters.

Holds the user-facing inputs of one simulation run, their declared ranges,
and validation. Invalid input is reported field by field and never
corrected; clamping only ever happens on derived values.
"""

import logging
import math
from dataclasses import dataclass, asdict, fields, replace
from enum import Enum
from numbers import Real
from typing import Any, Dict, List, Optional

from .config import DEFAULT_SCENARIO, BALANCED_PRESET

log = logging.getLogger(__name__)


class CropType(str, Enum):
    """Crops with a known baseline yield and market price."""
    WHEAT = "wheat"
    RICE = "rice"
    CORN = "corn"
    SOYBEAN = "soybean"
    COTTON = "cotton"
    SUGARCANE = "sugarcane"


class Season(str, Enum):
    """Indian cropping seasons. Informational only."""
    RABI = "rabi"
    KHARIF = "kharif"
    ZAID = "zaid"


@dataclass(frozen=True)
class Range:
    """Closed numeric range; ``low_inclusive=False`` makes the lower bound open."""
    low: float
    high: Optional[float] = None
    low_inclusive: bool = True

    def contains(self, value: float) -> bool:
        if self.low_inclusive:
            if value < self.low:
                return False
        elif value <= self.low:
            return False
        return self.high is None or value <= self.high

    def describe(self) -> str:
        left = "[" if self.low_inclusive else "("
        if self.high is None:
            return f">= {self.low:g}" if self.low_inclusive else f"> {self.low:g}"
        return f"{left}{self.low:g}, {self.high:g}]"


PARAM_RANGES: Dict[str, Range] = {
    "irrigation_frequency": Range(1, 7),
    "fertilizer_amount": Range(0, 100),
    "pesticides": Range(0, 60),
    "land_size": Range(0, 10, low_inclusive=False),
    "labor_cost": Range(0),
    "seed_cost": Range(0),
    "machinery": Range(0),
    "transportation": Range(0),
}

# camelCase names used by the dashboard front-end
CAMEL_ALIASES = {
    "irrigationFrequency": "irrigation_frequency",
    "fertilizerAmount": "fertilizer_amount",
    "cropType": "crop_type",
    "landSize": "land_size",
    "laborCost": "labor_cost",
    "seedCost": "seed_cost",
}


@dataclass(frozen=True)
class ParameterError:
    """One rejected input field."""
    field: str
    reason: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "reason": self.reason}


class ValidationError(ValueError):
    """Raised when one or more scenario inputs fall outside their ranges."""

    def __init__(self, errors: List[ParameterError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.reason}" for e in self.errors)
        super().__init__(f"Invalid simulation parameters - {summary}")

    def to_list(self) -> List[Dict[str, str]]:
        return [e.to_dict() for e in self.errors]


@dataclass(frozen=True)
class SimulationParams:
    """Inputs of one farming scenario. Costs are ₹ per hectare."""
    irrigation_frequency: int        # waterings per week
    fertilizer_amount: float         # kg/hectare
    pesticides: float                # kg/hectare
    crop_type: CropType
    season: Season
    land_size: float                 # hectares
    labor_cost: float
    seed_cost: float
    machinery: float
    transportation: float

    def __post_init__(self):
        # Known enum strings become members; unknown ones are left for validate().
        object.__setattr__(self, "crop_type", _try_enum(CropType, self.crop_type))
        object.__setattr__(self, "season", _try_enum(Season, self.season))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationParams":
        """
        Build params from a mapping with snake_case or camelCase keys.

        Enum fields are converted when the value is known; unknown values
        are kept as given so that ``validate`` can report them.
        """
        values = {CAMEL_ALIASES.get(k, k): v for k, v in data.items()}
        names = {f.name for f in fields(cls)}
        unknown = set(values) - names
        if unknown:
            raise TypeError(f"Unknown parameter(s): {', '.join(sorted(unknown))}")
        missing = names - set(values)
        if missing:
            raise TypeError(f"Missing parameter(s): {', '.join(sorted(missing))}")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["crop_type"] = _enum_value(self.crop_type)
        d["season"] = _enum_value(self.season)
        return d

    def with_changes(self, **changes) -> "SimulationParams":
        """Copy with some fields replaced."""
        return replace(self, **changes)


def _try_enum(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _enum_value(value):
    return value.value if isinstance(value, Enum) else value


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate(params: SimulationParams) -> List[ParameterError]:
    """Return one error per invalid field, in declaration order. Empty means valid."""
    errors = []

    for f in fields(params):
        name = f.name
        value = getattr(params, name)

        if name == "crop_type":
            if not isinstance(_try_enum(CropType, value), CropType):
                allowed = ", ".join(c.value for c in CropType)
                errors.append(ParameterError(name, f"unknown crop {value!r}; expected one of {allowed}"))
            continue
        if name == "season":
            if not isinstance(_try_enum(Season, value), Season):
                allowed = ", ".join(s.value for s in Season)
                errors.append(ParameterError(name, f"unknown season {value!r}; expected one of {allowed}"))
            continue

        rng = PARAM_RANGES[name]
        if not _is_number(value):
            errors.append(ParameterError(name, f"must be a number, got {type(value).__name__}"))
            continue
        if not math.isfinite(value):
            errors.append(ParameterError(name, "must be a finite number"))
            continue
        if name == "irrigation_frequency" and not isinstance(value, int):
            errors.append(ParameterError(name, f"must be a whole number of waterings, got {value!r}"))
            continue
        if not rng.contains(value):
            errors.append(ParameterError(name, f"{value!r} is outside the valid range {rng.describe()}"))

    return errors


def ensure_valid(params: SimulationParams) -> SimulationParams:
    """Raise ``ValidationError`` if any field is invalid, otherwise return params."""
    errors = validate(params)
    if errors:
        log.warning(f"Rejected scenario parameters: {[e.field for e in errors]}")
        raise ValidationError(errors)
    return params


def default_params() -> SimulationParams:
    """Fresh scenario with the documented defaults."""
    return SimulationParams.from_dict(DEFAULT_SCENARIO)


def optimized_params(base: Optional[SimulationParams] = None) -> SimulationParams:
    """
    Balanced preset: moderate irrigation, fertilizer and pesticide inputs.

    This is a fixed suggestion, not a search; all other fields of ``base``
    are kept.
    """
    base = base or default_params()
    return replace(base, **BALANCED_PRESET)
