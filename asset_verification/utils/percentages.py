def percent(part: int, whole: int) -> int:
    """
    Integer percentage rounded half-up, clamped to [0, 100].

    Integer arithmetic keeps the result identical across platforms, which the
    audit report relies on. Returns 0 when ``whole`` is 0.
    """
    if whole <= 0:
        return 0
    value = (200 * part + whole) // (2 * whole)
    return max(0, min(100, value))
