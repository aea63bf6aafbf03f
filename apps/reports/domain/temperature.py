# apps/reports/domain/temperature.py
"""
Korekcja temperaturowa rezystancji izolacji (raporty NETA).

Zmierzona rezystancja jest przeliczana do 20°C: wartość * TCF(temperatura).
"""
import math
from typing import Dict, Mapping

# Współczynniki korekcji temperaturowej (TCF) dla -24..110 °C
TCF_TABLE: Dict[int, float] = {
    -24: 0.054, -23: 0.068, -22: 0.082, -21: 0.096, -20: 0.11,
    -19: 0.124, -18: 0.138, -17: 0.152, -16: 0.166, -15: 0.18,
    -14: 0.194, -13: 0.208, -12: 0.222, -11: 0.236, -10: 0.25,
    -9: 0.264, -8: 0.278, -7: 0.292, -6: 0.306, -5: 0.32,
    -4: 0.336, -3: 0.352, -2: 0.368, -1: 0.384, 0: 0.4,
    1: 0.42, 2: 0.44, 3: 0.46, 4: 0.48, 5: 0.5,
    6: 0.526, 7: 0.552, 8: 0.578, 9: 0.604, 10: 0.63,
    11: 0.666, 12: 0.702, 13: 0.738, 14: 0.774, 15: 0.81,
    16: 0.848, 17: 0.886, 18: 0.924, 19: 0.962, 20: 1.0,
    21: 1.05, 22: 1.1, 23: 1.15, 24: 1.2, 25: 1.25,
    26: 1.316, 27: 1.382, 28: 1.448, 29: 1.514, 30: 1.58,
    31: 1.664, 32: 1.748, 33: 1.832, 34: 1.872, 35: 2.0,
    36: 2.1, 37: 2.2, 38: 2.3, 39: 2.4, 40: 2.5,
    41: 2.628, 42: 2.756, 43: 2.884, 44: 3.012, 45: 3.15,
    46: 3.316, 47: 3.482, 48: 3.648, 49: 3.814, 50: 3.98,
    51: 4.184, 52: 4.388, 53: 4.592, 54: 4.796, 55: 5.0,
    56: 5.26, 57: 5.52, 58: 5.78, 59: 6.04, 60: 6.3,
    61: 6.62, 62: 6.94, 63: 7.26, 64: 7.58, 65: 7.9,
    66: 8.32, 67: 8.74, 68: 9.16, 69: 9.58, 70: 10.0,
    71: 10.52, 72: 11.04, 73: 11.56, 74: 12.08, 75: 12.6,
    76: 13.24, 77: 13.88, 78: 14.52, 79: 15.16, 80: 15.8,
    81: 16.64, 82: 17.48, 83: 18.32, 84: 19.16, 85: 20.0,
    86: 21.04, 87: 22.08, 88: 23.12, 89: 24.16, 90: 25.2,
    91: 26.45, 92: 27.7, 93: 28.95, 94: 30.2, 95: 31.6,
    96: 33.28, 97: 34.96, 98: 36.64, 99: 38.32, 100: 40.0,
    101: 42.08, 102: 44.16, 103: 46.24, 104: 48.32, 105: 50.4,
    106: 52.96, 107: 55.52, 108: 58.08, 109: 60.64, 110: 63.2,
}

# Wartości, których nie przeliczamy (np. ">2200", "N/A")
PASSTHROUGH_PREFIXES = ('>', '<')


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def get_tcf(celsius: float) -> float:
    """TCF dla temperatury zaokrąglonej do pełnego stopnia; poza tabelą 1.0."""
    if not math.isfinite(celsius):
        return 1.0
    return TCF_TABLE.get(_round_half_up(celsius), 1.0)


def fahrenheit_to_celsius(fahrenheit: float) -> int:
    return _round_half_up((fahrenheit - 32) * 5 / 9)


def celsius_to_fahrenheit(celsius: float) -> int:
    return _round_half_up(celsius * 9 / 5 + 32)


def correct_reading(value, tcf: float) -> str:
    text = str(value) if value is not None else ''
    stripped = text.strip()
    if not stripped or stripped.startswith(PASSTHROUGH_PREFIXES) or stripped.lower() == 'n/a':
        return text
    try:
        number = float(stripped)
    except ValueError:
        return text
    if math.isnan(number) or math.isinf(number):
        return text
    return f"{number * tcf:.2f}"


def correct_row(row: Mapping[str, object], tcf: float, key_field: str = 'bus_section') -> Dict[str, object]:
    """Przelicza wszystkie kolumny wiersza poza kluczem (np. sekcją szyn)."""
    corrected = {}
    for key, value in row.items():
        if key == key_field:
            corrected[key] = value
        else:
            corrected[key] = correct_reading(value, tcf)
    return corrected
