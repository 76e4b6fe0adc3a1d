from .recurrence import simulate, exponential_closed_form
from .sweep import SweepResult, parameter_sweep, ricker_sweep

__all__ = ["simulate", "exponential_closed_form", "SweepResult", "parameter_sweep", "ricker_sweep"]
