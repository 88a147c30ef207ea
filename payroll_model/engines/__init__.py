from .stats import additional_revenue, compute_stats, roster_to_frame

__all__ = ["additional_revenue", "compute_stats", "roster_to_frame"]
