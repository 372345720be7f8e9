from WWbbAnalysis.channels.base import Channel


class HHChannel(Channel):
    """Di-Higgs signal region, no cuts defined yet"""

    name = "HH"
