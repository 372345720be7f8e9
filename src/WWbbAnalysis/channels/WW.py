from WWbbAnalysis.channels.base import Channel


class WWChannel(Channel):
    """Opposite-sign WW signal region, no cuts defined yet"""

    name = "WW"
