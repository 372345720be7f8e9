from .hist_helpers import get_hist_collections, get_axes_collections


def histogrammer(
    hist_collections=(),
    axes_collections=("common",),
    custom_axes=None,
    **kwargs,
):
    """
    Book the histograms of the named collections (see utils/histogramming/histograms).
    `custom_axes` replaces the registered axes collections when given.
    """

    ## Common axes
    if custom_axes:
        axes = custom_axes
    else:
        axes = get_axes_collections(axes_collections)

    ## Histograms
    return get_hist_collections(axes, hist_collections, **kwargs)
