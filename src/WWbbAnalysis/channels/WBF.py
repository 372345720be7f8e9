import awkward as ak
import numpy as np

from WWbbAnalysis.channels.base import Channel
from WWbbAnalysis.helpers.bhadron_helper import CENTRAL_B
from WWbbAnalysis.helpers.func import flatten
from WWbbAnalysis.utils.selection import leading_lepton_pt


class WBFChannel(Channel):
    name = "WBF"
    hist_collections = ["WBF"]

    def fill_stage(self, output, ev, stage, syst):
        output["cuts_WBF"].fill(
            syst=syst, cut=np.full(len(ev), stage), weight=flatten(ev.weight)
        )

    def analyze(self, ctx, output, syst="nominal"):
        cfg = self.config
        njet = ak.num(ctx.alljets)
        output["njets_before_WBF"].fill(
            syst=syst, njet=flatten(njet), weight=flatten(ctx.weight)
        )

        # cut on 2 jets in opposite hemispheres with minimal mass and rapidity distance
        ev = ctx[njet >= 2]
        j0, j1 = ev.alljets[:, 0], ev.alljets[:, 1]
        req_jj = (
            (j0.eta * j1.eta <= 0.0)
            & (abs(j0.eta - j1.eta) >= cfg["deltayJJ_min"])
            & ((j0 + j1).mass >= cfg["massJJ_min"])
        )
        ev = ev[req_jj]
        self.fill_stage(output, ev, 2, syst)

        # cuts on the 2 lepton MET system
        ptlep1, ptlep2 = leading_lepton_pt(ev.lepton_p, ev.lepton_m)
        req_llmet = (
            (ev.m_trans_llMET >= cfg["m_trans_llMET_min"])
            & (ev.m_ll >= cfg["m_ll_min"])
            & (ptlep1 >= cfg["ptlep1_min"])
            & (ptlep2 >= cfg["ptlep2_min"])
            & (ev.MET_pt >= cfg["MET_min"])
        )
        ev = ev[req_llmet]
        self.fill_stage(output, ev, 3, syst)
        output["njets_after_WBF"].fill(
            syst=syst, njet=flatten(ak.num(ev.alljets)), weight=flatten(ev.weight)
        )

        # veto if tag jets are central (i.e. tagged) b-jets
        if cfg["veto_btagged_tagjets"]:
            req_veto = (ev.alljets[:, 0].label != CENTRAL_B) & (
                ev.alljets[:, 1].label != CENTRAL_B
            )
            ev = ev[req_veto]
            self.fill_stage(output, ev, 4, syst)

        return output
