"""Rule-based optimization suggestions for a scenario."""
from typing import List

from .params import SimulationParams

# Thresholds above which an input is flagged, checked in this order.
IRRIGATION_LIMIT = 4
FERTILIZER_LIMIT = 70
PESTICIDE_LIMIT = 35

MESSAGES = {
    "en": {
        "irrigation": "Reduce irrigation frequency - overwatering may harm crops",
        "fertilizer": "Reduce fertilizer amount - excessive fertilizer damages soil",
        "pesticides": "Use less pesticides - consider organic alternatives",
        "balanced": "Your parameters look well balanced!",
    },
    "hi": {
        "irrigation": "सिंचाई की आवृत्ति कम करें - अधिक पानी फसल को नुकसान पहुंचा सकता है",
        "fertilizer": "उर्वरक की मात्रा कम करें - अधिक उर्वरक मिट्टी को नुकसान पहुंचाता है",
        "pesticides": "कीटनाशक का कम उपयोग करें - जैविक विकल्पों पर विचार करें",
        "balanced": "आपके पैरामीटर संतुलित लग रहे हैं!",
    },
}

RULES = [
    ("irrigation", lambda p: p.irrigation_frequency > IRRIGATION_LIMIT),
    ("fertilizer", lambda p: p.fertilizer_amount > FERTILIZER_LIMIT),
    ("pesticides", lambda p: p.pesticides > PESTICIDE_LIMIT),
]


def suggestion_keys(params: SimulationParams) -> List[str]:
    keys = [key for key, check in RULES if check(params)]
    return keys or ["balanced"]


def generate_suggestions(params: SimulationParams, language: str = "en") -> List[str]:
    text = MESSAGES.get(language, MESSAGES["en"])
    return [text[key] for key in suggestion_keys(params)]
