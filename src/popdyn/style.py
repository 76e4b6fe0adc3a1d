import seaborn as sns
from matplotlib.markers import MarkerStyle

from popdyn.numerical.fixed_points import STABLE, SEMI_STABLE, UNSTABLE


def set_style():
    sns.set_style("ticks")
    sns.set_palette(["#3B76BC", "#3E754E", "#96C75A", "#F3B15B", "#E28A71", "#EC6238", "#632A7D"])


TRAJECTORY_COLOR = "#3B76BC"
THEORY_COLOR = "#EC6238"
BIFURCATION_COLOR = "#3F3C3C"

STABILITIY_TYPE_TO_MARKER_STYLE_KWARGS = {
    STABLE: {
        "markerfacecolor": "black",
        "markeredgecolor": "black",
        "marker": MarkerStyle("o"),
        "markersize": 8,
    },
    SEMI_STABLE: {
        "markerfacecolor": "black",
        "markerfacecoloralt": "white",
        "markeredgecolor": "black",
        "marker": MarkerStyle("o", fillstyle="top"),
        "markersize": 8,
    },
    UNSTABLE: {
        "markerfacecolor": "white",
        "markeredgecolor": "black",
        "marker": MarkerStyle("o"),
        "markersize": 8,
    },
}
