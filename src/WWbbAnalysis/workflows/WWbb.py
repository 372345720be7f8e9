import awkward as ak
import numpy as np
from coffea import processor
from coffea.analysis_tools import Weights

## selections & event context for this workflow
from WWbbAnalysis.utils.WWbb_parameters import load_config
from WWbbAnalysis.utils.reconstruction import reconstruct

## signal-region definitions
from WWbbAnalysis.channels import channels as available_channels


class NanoProcessor(processor.ProcessorABC):
    def __init__(
        self,
        name="",
        selectionModifier="default",
        cuts=None,
        channels=None,
    ):
        self.name = name
        self.selMod = selectionModifier
        self.config = load_config(self.selMod, cuts)
        if channels is None:
            channels = list(available_channels.keys())
        for ch in channels:
            if ch not in available_channels:
                raise ValueError(
                    f"Channel {ch} not found in {available_channels.keys()}. Check WWbbAnalysis/channels"
                )
        self.channels = [available_channels[ch](self.config) for ch in channels]

    def process(self, events):
        dataset = events.metadata["dataset"]
        return {dataset: self.process_events(events)}

    ## Processed events per-chunk, made selections, filled histograms
    def process_events(self, events):
        ######################
        #  Create histogram  #
        ######################
        output = {
            "sumw": 0.0,
            "cutflow": processor.defaultdict_accumulator(float),
        }
        for ch in self.channels:
            output.update(ch.get_histograms())

        weights = Weights(len(events), storeIndividual=True)
        if "genWeight" in events.fields:
            weights.add("genweight", ak.to_numpy(events.genWeight))
        else:
            print("genWeight not exist in", self.name, ", unit weights used")
        weight = weights.weight()
        output["sumw"] = float(np.sum(weight))

        ####################
        #    Selections    #
        ####################
        ctx, cutflow = reconstruct(events, self.config, weight)
        for key, value in cutflow.items():
            output["cutflow"][key] += value
        # Skip chunks without preselected events
        if ctx is None:
            return output

        ####################
        #     Channels     #
        ####################
        for ch in self.channels:
            output = ch.analyze(ctx, output)

        return output

    ## post process, return the accumulator, compressed
    def postprocess(self, accumulator):
        return accumulator
