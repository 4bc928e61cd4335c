from .stats_view import StatsView

__all__ = ["StatsView"]
