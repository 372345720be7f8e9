from .axes.common import axes as common_axes

from .histograms.WBF import get_histograms as WBF_hists

## registered axes and histogram collections, one histogram collection per channel
axes_collections = {
    "common": common_axes,
}
hist_collections = {
    "WBF": WBF_hists,
}


def get_axes_collections(axes_list: list = None):
    if axes_list is None:
        axes_list = list(axes_collections.keys())

    output = {}
    for ax in axes_list:
        if ax not in axes_collections:
            raise ValueError(
                f"Axis {ax} not found in {axes_collections.keys()}. Check utils/histogramming/axes"
            )
        output = output | axes_collections[ax]

    return output


def get_hist_collections(axes: dict, hist_list: list, **kwargs):
    output = {}
    for h in hist_list:
        if h not in hist_collections:
            raise ValueError(
                f"Histogram collection {h} not found in {hist_collections.keys()}. Check utils/histogramming/histograms"
            )
        output = output | hist_collections[h](axes, **kwargs)

    return output
