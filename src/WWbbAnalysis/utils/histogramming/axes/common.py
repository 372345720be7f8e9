import hist

axes = {
    "syst": hist.axis.StrCategory([], name="syst", growth=True),
    "cut": hist.axis.Regular(5, -0.5, 4.5, name="cut", label="Cut stage"),
    "njet": hist.axis.Regular(10, -0.5, 9.5, name="njet", label="N jets"),
}
