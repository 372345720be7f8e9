from WWbbAnalysis.utils.histogramming.histogrammer import histogrammer


class Channel:
    r"""
    One signal-region definition run on the preselected events.
        get_histograms: book the channel histograms
        analyze: run the cut flow on the event context and fill `output`

    A channel without histogram collections and cuts is a valid no-op.
    """

    name = ""
    hist_collections = []

    def __init__(self, config):
        self.config = config.get(self.name, {})

    def get_histograms(self, **kwargs):
        if not self.hist_collections:
            return {}
        return histogrammer(hist_collections=self.hist_collections, **kwargs)

    def analyze(self, ctx, output, syst="nominal"):
        return output
