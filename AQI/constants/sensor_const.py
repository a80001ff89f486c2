"""
Field names used by PurpleAir sensor status payloads
"""

# Laser counter channel A (CF=1 mass concentrations, µg/m³)
PM25_CHANNEL_A = "pm2_5_cf_1"
PM10_CHANNEL_A = "pm10_0_cf_1"

# Laser counter channel B
PM25_CHANNEL_B = "pm2_5_cf_1_b"
PM10_CHANNEL_B = "pm10_0_cf_1_b"

SENSOR_CHANNELS = {
    "a": (PM25_CHANNEL_A, PM10_CHANNEL_A),
    "b": (PM25_CHANNEL_B, PM10_CHANNEL_B),
}
