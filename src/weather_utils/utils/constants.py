"""Physical and numerical constants used across the library."""

# Temperature scale conversion.
CELSIUS_TO_FAHRENHEIT_FACTOR: float = 1.8
# Truncated 5/9, kept as-is so existing readings convert identically.
FAHRENHEIT_TO_CELSIUS_FACTOR: float = 0.55555
FAHRENHEIT_OFFSET: float = 32.0

# Absolute humidity (Magnus form).
MAGNUS_SATURATION_PRESSURE_HPA: float = 6.112
MAGNUS_COEFFICIENT: float = 17.67
MAGNUS_TEMPERATURE_OFFSET_C: float = 243.5
WATER_VAPOR_DENSITY_FACTOR: float = 2.1674
ZERO_CELSIUS_K: float = 273.15

# Barometric altitude.
SEA_LEVEL_PRESSURE_HPA: float = 1013.25
BAROMETRIC_EXPONENT_DENOMINATOR: float = 5.257
TEMPERATURE_LAPSE_RATE_KPM: float = 0.0065

# Tolerance of unit-value equality [same unit as the compared magnitudes].
UNIT_EQUALITY_EPSILON: float = 0.01
