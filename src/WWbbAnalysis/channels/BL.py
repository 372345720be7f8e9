from WWbbAnalysis.channels.base import Channel


class BLChannel(Channel):
    """Baseline-lepton region, no cuts defined yet"""

    name = "BL"
