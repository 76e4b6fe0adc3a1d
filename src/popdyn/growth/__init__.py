from .growth_law import GrowthLaw, Exponential, Ricker, Logistic

GROWTH_LAWS: dict[str, type[GrowthLaw]] = {
    Exponential.name: Exponential,
    Ricker.name: Ricker,
    Logistic.name: Logistic,
}

__all__ = ["GrowthLaw", "Exponential", "Ricker", "Logistic", "GROWTH_LAWS"]
