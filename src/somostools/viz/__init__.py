from .growth import growth_points, plot_growth

__all__ = [
    "growth_points",
    "plot_growth",
]
