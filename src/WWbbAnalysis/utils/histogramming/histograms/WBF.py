import hist as Hist


def get_histograms(axes, **kwargs):
    hists = {
        "cuts_WBF": Hist.Hist(axes["syst"], axes["cut"], Hist.storage.Weight()),
    }
    for stage in ["before", "after"]:
        hists[f"njets_{stage}_WBF"] = Hist.Hist(
            axes["syst"], axes["njet"], Hist.storage.Weight()
        )

    return hists
