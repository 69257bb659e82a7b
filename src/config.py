import logging
import math
import os

from components import AxisMode, RotationConfig

logger = logging.getLogger(__name__)

# Environment variables and the defaults used when they are unset or empty
DEFAULTS = {
    "ROTATOR_RATE_PER_SECOND": "30.0",
    "ROTATOR_AXIS_MODE": "world",
    "ROTATOR_FRAME_RATE": "60.0",
    "ROTATOR_DURATION": "",
    "ROTATOR_LOG_LEVEL": "INFO",
}


def _read(environ, key):
    if environ is None:
        environ = os.environ
    value = environ.get(key, "").strip()
    return value or DEFAULTS[key]


def _parse_float(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def validate_rotation_parameters(parameters):
    """
    Check raw rotation settings before building a RotationConfig.

    Args:
        parameters (dict): Mapping with "ratePerSecond" and optional "axisMode"

    Returns:
        tuple: (True, None) when valid, (False, error message) otherwise
    """
    if "ratePerSecond" not in parameters:
        return False, "Missing required field: ratePerSecond"

    rate = parameters["ratePerSecond"]
    if isinstance(rate, str):
        rate = _parse_float(rate)
    if rate is None or isinstance(rate, bool) or not isinstance(rate, (int, float)):
        return False, "Field 'ratePerSecond' must be a number"
    if not math.isfinite(rate):
        return False, "Field 'ratePerSecond' must be finite"

    try:
        AxisMode.parse(parameters.get("axisMode", AxisMode.WORLD_UP))
    except ValueError as e:
        return False, str(e)

    return True, None


def load_rotation_config(environ=None):
    parameters = {
        "ratePerSecond": _read(environ, "ROTATOR_RATE_PER_SECOND"),
        "axisMode": _read(environ, "ROTATOR_AXIS_MODE"),
    }
    is_valid, error_message = validate_rotation_parameters(parameters)
    if not is_valid:
        logger.error(f"Invalid rotation configuration: {error_message}")
        raise ValueError(error_message)

    config = RotationConfig(float(parameters["ratePerSecond"]), parameters["axisMode"])
    logger.debug(f"Loaded {config!r}")
    return config


def load_frame_rate(environ=None):
    frame_rate = _parse_float(_read(environ, "ROTATOR_FRAME_RATE"))
    if frame_rate is None or not math.isfinite(frame_rate) or frame_rate <= 0:
        raise ValueError("ROTATOR_FRAME_RATE must be a positive number")
    return frame_rate


def load_duration(environ=None):
    """Seconds to run for, or None to run until stopped."""
    raw_value = _read(environ, "ROTATOR_DURATION")
    if not raw_value:
        return None
    duration = _parse_float(raw_value)
    if duration is None or not math.isfinite(duration) or duration < 0:
        raise ValueError("ROTATOR_DURATION must be a non-negative number")
    return duration


def load_log_level(environ=None):
    level_name = _read(environ, "ROTATOR_LOG_LEVEL").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{level_name}'")
    return level
