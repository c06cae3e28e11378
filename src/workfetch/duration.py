from __future__ import annotations


def format_duration(total_minutes: int) -> str:
    hours = total_minutes // 60
    minutes = total_minutes % 60
    if hours > 0:
        return f"{hours} Std {minutes} Min"
    return f"{minutes} Min"
