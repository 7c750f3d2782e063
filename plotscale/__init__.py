from plotscale.adapters import classify_values
from plotscale.api import scale_x_discrete, scale_y_discrete, xlim, ylim
from plotscale.config import ScaleConfig, load_scale_config
from plotscale.errors import PlotScaleDataError, PlotScaleError, ScaleConfigError
from plotscale.panel import PanelScales
from plotscale.position import X_AESTHETICS, Y_AESTHETICS, PositionDiscreteScale
from plotscale.ranges import ContinuousRange, DiscreteRange, expand_range, union_range
from plotscale.values import Categorical, CategoricalBatch, Numeric, NumericBatch

__all__ = [
    "Categorical",
    "CategoricalBatch",
    "ContinuousRange",
    "DiscreteRange",
    "Numeric",
    "NumericBatch",
    "PanelScales",
    "PlotScaleDataError",
    "PlotScaleError",
    "PositionDiscreteScale",
    "ScaleConfig",
    "ScaleConfigError",
    "X_AESTHETICS",
    "Y_AESTHETICS",
    "classify_values",
    "expand_range",
    "load_scale_config",
    "scale_x_discrete",
    "scale_y_discrete",
    "union_range",
    "xlim",
    "ylim",
]
