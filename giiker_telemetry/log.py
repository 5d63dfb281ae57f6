import logging

LOGGER = logging.getLogger("giiker_telemetry")
