"""Air Quality Index (AQI) constants based on EPA standards.

This module contains the concentration breakpoints and corresponding AQI values
for particulate matter according to the US EPA Air Quality Index, together with
the category table used to label and color a computed index.

Each breakpoint row is ``(concentration_low, concentration_high, aqi_low, aqi_high)``
and covers the closed range ``[concentration_low, concentration_high]``.

References:
    - EPA AQI Basics: https://www.airnow.gov/aqi/aqi-basics/
    - EPA AQI Technical Assistance Document: https://www.airnow.gov/sites/default/files/2020-05/aqi-technical-assistance-document-sept2018.pdf
"""

# PM2.5 (Fine Particulate Matter, µg/m³)
# 24-hour average, truncated to 1 decimal place before lookup
PM25_BREAKPOINTS = (
    (0.0, 12.0, 0, 50),  # Good
    (12.1, 35.4, 51, 100),  # Moderate
    (35.5, 55.4, 101, 150),  # Unhealthy for Sensitive Groups
    (55.5, 150.4, 151, 200),  # Unhealthy
    (150.5, 250.4, 201, 300),  # Very Unhealthy
    (250.5, 350.4, 301, 400),  # Hazardous
    (350.5, 500.4, 401, 500),  # Hazardous
)
PM25_DECIMALS = 1

# PM10 (Coarse Particulate Matter, µg/m³)
# 24-hour average, truncated to an integer before lookup
PM10_BREAKPOINTS = (
    (0, 54, 0, 50),  # Good
    (55, 154, 51, 100),  # Moderate
    (155, 254, 101, 150),  # Unhealthy for Sensitive Groups
    (255, 354, 151, 200),  # Unhealthy
    (355, 424, 201, 300),  # Very Unhealthy
    (425, 504, 301, 400),  # Hazardous
    (505, 604, 401, 500),  # Hazardous
)
PM10_DECIMALS = 0

# Relative slack absorbing binary float noise when truncating
# (2.3 * 10 == 22.999999999999996); a few ulps, far below any real reading step
TRUNCATION_TOLERANCE = 1e-13

# (AQI upper threshold, category, color name, display color)
# The final row has no upper bound: anything above 500 is still Hazardous.
AQI_CATEGORIES = (
    (50, "Good", "Green", "rgb(0,228,0)"),
    (100, "Moderate", "Yellow", "rgb(255,255,0)"),
    (150, "Unhealthy for Sensitive Groups", "Orange", "rgb(255,126,0)"),
    (200, "Unhealthy", "Red", "rgb(255,0,0)"),
    (300, "Very Unhealthy", "Purple", "rgb(143,63,151)"),
    (500, "Hazardous", "Maroon", "rgb(126,0,35)"),
)

# Populations at elevated risk from particle pollution
SENSITIVE_GROUPS_THRESHOLD = 100
SENSITIVE_GROUPS_NOTE = (
    "People with heart or lung disease, older adults, children, "
    "and people of lower socioeconomic status"
)
