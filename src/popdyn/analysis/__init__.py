from .growth_rate import per_capita_growth_rate, fit_growth_rate_line, theoretical_growth_rate_line

__all__ = ["per_capita_growth_rate", "fit_growth_rate_line", "theoretical_growth_rate_line"]
