import awkward as ak
import numpy as np
from coffea.nanoevents.methods import vector

from WWbbAnalysis.helpers.func import (
    to_vector,
    sort_by_pt,
    missing_momentum,
    transverse_mass,
)
from WWbbAnalysis.helpers.bhadron_helper import (
    CENTRAL_B,
    FORWARD_B,
    LIGHT,
    bhadron_sel,
    associate_bhadrons,
)
from WWbbAnalysis.utils.selection import (
    lepton_sel,
    lepton_isolation,
    jet_sel,
    jet_lepton_cleaning,
    opposite_charge,
)


def gen_objects(events):
    """Build the vector collections used by the selection from the generator-level branches"""
    lep = events.GenDressedLepton
    bare = ak.zip(
        {
            "pt": lep.barePt,
            "eta": lep.bareEta,
            "phi": lep.barePhi,
            "mass": lep.bareMass,
        }
    )
    leptons = to_vector(lep, extras=["pdgId"])
    leptons = ak.with_field(leptons, -np.sign(lep.pdgId), "charge")
    leptons = ak.with_field(leptons, to_vector(bare), "bare")

    return {
        "leptons": leptons,
        "visible": to_vector(events.GenVisPart, extras=["pdgId"]),
        "neutrinos": sort_by_pt(to_vector(events.GenNeutrino, extras=["pdgId"])),
        "jets": sort_by_pt(to_vector(events.GenJet)),
        "unstable": to_vector(
            events.GenUnstable, extras=["pdgId", "charge", "daughterPdgId"]
        ),
    }


def reconstruct(events, config, weight):
    """
    Object selection, preselection and role assignment.

    Returns the per-event context of the preselected events (None if no event
    passes) and the preselection cut-flow.
    """
    objs = gen_objects(events)
    weight = np.asarray(weight)
    cutflow = {"all": float(np.sum(weight))}

    ####################
    #     Leptons      #
    ####################
    leptons = objs["leptons"]
    electrons = leptons[lepton_sel(leptons, 11, config)]
    muons = leptons[lepton_sel(leptons, 13, config)]
    iso_ele = electrons[lepton_isolation(electrons, objs["visible"], config)]
    iso_mu = muons[lepton_isolation(muons, objs["visible"], config)]

    ####################
    #       Jets       #
    ####################
    jets = objs["jets"][jet_sel(objs["jets"], config)]
    iso_bare = ak.concatenate([iso_ele.bare, iso_mu.bare], axis=1)
    alljets = jets[jet_lepton_cleaning(jets, iso_bare, config)]

    ## last b-hadrons of each decay chain
    bhadrons, nmissing = bhadron_sel(objs["unstable"], config["bhad_ptmin"])
    cutflow["bhad_missing_vertex"] = nmissing

    ####################
    #   Preselection   #
    ####################
    req_emu = ak.to_numpy((ak.num(iso_ele) == 1) & (ak.num(iso_mu) == 1))
    req_os = ak.to_numpy(opposite_charge(iso_ele, iso_mu))
    event_level = req_emu & req_os
    cutflow["one_ele_one_mu"] = float(np.sum(weight[req_emu]))
    cutflow["opposite_charge"] = float(np.sum(weight[event_level]))
    if not np.any(event_level):
        return None, cutflow

    ####################
    # Role assignment  #
    ####################
    leps = ak.concatenate([iso_ele, iso_mu], axis=1)[event_level]
    lepton_p = leps[leps.charge > 0][:, 0]
    lepton_m = leps[leps.charge < 0][:, 0]

    # only the leading neutrino is examined for each lepton
    nu = ak.firsts(objs["neutrinos"][event_level])
    nu_p = ak.mask(nu, ak.fill_none(nu.pdgId + lepton_p.pdgId == 1, False))
    nu_m = ak.mask(nu, ak.fill_none(nu.pdgId + lepton_m.pdgId == -1, False))

    alljets = associate_bhadrons(
        alljets[event_level],
        bhadrons[event_level],
        config["bjet_dR"],
        config["bjet_central_rapmax"],
    )
    bjets_central = alljets[alljets.label == CENTRAL_B]
    # only the first central b-jet is examined for each charge sign
    first_b = ak.firsts(bjets_central)
    bjet_p = ak.mask(first_b, ak.fill_none(first_b.bhadCharge > 0, False))
    bjet_m = ak.mask(first_b, ak.fill_none(first_b.bhadCharge < 0, False))

    ####################
    # Event quantities #
    ####################
    met = missing_momentum(objs["visible"][event_level])
    ll = lepton_p + lepton_m

    ctx = ak.zip(
        {
            "lepton_p": lepton_p,
            "lepton_m": lepton_m,
            "nu_p": nu_p,
            "nu_m": nu_m,
            "bjet_p": bjet_p,
            "bjet_m": bjet_m,
            "alljets": alljets,
            "lightjets": alljets[alljets.label == LIGHT],
            "bjets_central": bjets_central,
            "bjets_forward": alljets[alljets.label == FORWARD_B],
            "MET": met,
            "MET_pt": met.pt,
            "m_ll": ll.mass,
            "m_trans_llMET": transverse_mass(ll, met),
            "m_Wp": (lepton_p + nu_p).mass,
            "m_Wm": (lepton_m + nu_m).mass,
            "weight": weight[event_level],
        },
        depth_limit=1,
        behavior=vector.behavior,
    )
    return ctx, cutflow
