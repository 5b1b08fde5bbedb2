def clamp(raw: float, min_val: float, max_val: float) -> float:
    lower = min(min_val, max_val)
    upper = max(min_val, max_val)
    clamped = max(lower, min(upper, raw))

    return clamped


def snap(raw: float, step: float, origin: float = 0) -> float:
    """Round raw to the nearest multiple of step counted from origin."""
    return origin + round((raw - origin) / step) * step
