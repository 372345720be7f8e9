import awkward as ak
import numpy as np

from WWbbAnalysis.helpers.func import delta_r_rap


def lepton_sel(leptons, flavour, config):
    lepmask = (
        (abs(leptons.pdgId) == flavour)
        & (abs(leptons.eta) < config["lepton_etamax"])
        & (leptons.pt > config["lepton_ptmin"])
    )
    return lepmask


def lepton_isolation(leptons, visible, config):
    """
    Cone isolation: the pT sum of the visible particles within lepton_iso_dR
    (the lepton itself included) must stay below (1 + lepton_iso_frac) * pT
    """
    dr, (_, part) = leptons.metric_table(
        visible, metric=delta_r_rap, return_combinations=True
    )
    ptcone = ak.sum(part.pt * (dr < config["lepton_iso_dR"]), axis=-1)
    return ptcone < (1.0 + config["lepton_iso_frac"]) * leptons.pt


def jet_sel(jets, config):
    jetmask = (jets.pt > config["jet_ptmin"]) & (abs(jets.rap) <= config["jet_etamax"])
    return jetmask


def jet_lepton_cleaning(jets, leptons, config):
    # leptons: undressed momenta of all isolated leptons
    return ak.all(
        jets.metric_table(leptons, metric=delta_r_rap)
        > config["lepton_jet_isolation_dR"],
        axis=-1,
    )


def opposite_charge(electrons, muons):
    req_os = ak.firsts(electrons.charge) * ak.firsts(muons.charge) == -1
    return ak.fill_none(req_os, False)


def leading_lepton_pt(lepton_p, lepton_m):
    ptlep1 = np.maximum(lepton_p.pt, lepton_m.pt)
    ptlep2 = np.minimum(lepton_p.pt, lepton_m.pt)
    return ptlep1, ptlep2
