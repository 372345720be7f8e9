from WWbbAnalysis.channels.WW import WWChannel
from WWbbAnalysis.channels.WBF import WBFChannel
from WWbbAnalysis.channels.HH import HHChannel
from WWbbAnalysis.channels.BL import BLChannel

# run in this order
channels = {}
channels["WW"] = WWChannel
channels["WBF"] = WBFChannel
channels["HH"] = HHChannel
channels["BL"] = BLChannel
