"""Fixed Airly API path segments."""

BASIC = "https://airapi.airly.eu/v2/"

INSTALLATIONS = "installations"
MEASUREMENTS = "measurements"
META = "meta"

NEAREST = "nearest"
INSTALLATION = "installation"
POINT = "point"

INDEXES = f"{META}/indexes"
MEASUREMENTS_TYPES = f"{META}/measurements"
