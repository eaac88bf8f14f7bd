"""Expected yield from crop baseline and input multipliers."""
from .config import CROP_PARAMS
from .params import CropType, SimulationParams

# Multipliers are centred on the default scenario (3 waterings/week,
# 50 kg/ha fertilizer) so defaults reproduce base_yield * land_size.
REFERENCE_IRRIGATION = 3
REFERENCE_FERTILIZER = 50
IRRIGATION_STEP = 0.10
FERTILIZER_STEP = 0.005


def base_yield(crop) -> float:
    """Baseline yield in tons/hectare for a crop."""
    return CROP_PARAMS[CropType(crop).value]["base_yield_t_ha"]


def irrigation_multiplier(irrigation_frequency: int) -> float:
    return 1 + (irrigation_frequency - REFERENCE_IRRIGATION) * IRRIGATION_STEP


def fertilizer_multiplier(fertilizer_amount: float) -> float:
    return 1 + (fertilizer_amount - REFERENCE_FERTILIZER) * FERTILIZER_STEP


def compute_yield(params: SimulationParams) -> float:
    """Expected yield in tons for the whole plot, floored at zero."""
    y = (
        base_yield(params.crop_type)
        * irrigation_multiplier(params.irrigation_frequency)
        * fertilizer_multiplier(params.fertilizer_amount)
        * params.land_size
    )
    return max(0.0, y)
