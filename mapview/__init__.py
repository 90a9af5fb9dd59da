from .region import Region, compute_region

__all__ = ["Region", "compute_region"]
