from plotscale.adapters.normalize import classify_values

__all__ = ["classify_values"]
