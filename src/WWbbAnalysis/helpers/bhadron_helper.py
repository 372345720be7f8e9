import math
import warnings

import awkward as ak
import numba as nb
import numpy as np

###############
#  Jet labels #
###############
LIGHT = 0
CENTRAL_B = 1
FORWARD_B = 2


class MissingDecayVertex(UserWarning):
    """An unstable b-hadron candidate was stored without its decay vertex"""


###############
#  Functions  #
###############
def _digit(apid, loc):
    return (apid // 10**loc) % 10


def has_bottom(pdgid):
    r"""
    Whether a PDG code carries a bottom quark, from the quark digits of the
    PDG numbering scheme (n_q3, n_q2, n_q1). Fundamental particles other than
    the b quark itself and nuclei/extra-bit codes have no bottom content.
    """
    apid = abs(pdgid)
    fundamental = (_digit(apid, 2) == 0) & (_digit(apid, 3) == 0)
    composite = (apid < 10000000) & ~fundamental
    quark_digit = (
        (_digit(apid, 1) == 5) | (_digit(apid, 2) == 5) | (_digit(apid, 3) == 5)
    )
    return (apid == 5) | (composite & quark_digit)


def missing_vertex(unstable):
    return ak.is_none(unstable.daughterPdgId, axis=1)


def bhadron_sel(unstable, ptmin=5.0):
    """
    Select the last b-hadron of each decay chain: bottom-flavoured unstable
    particles above ptmin with at least one direct decay product and no
    bottom-flavoured one. Candidates without a decay vertex are skipped with
    a MissingDecayVertex warning.
    """
    cand = unstable[(unstable.pt > ptmin) & has_bottom(unstable.pdgId)]
    novtx = missing_vertex(cand)
    nmissing = int(ak.sum(novtx))
    if nmissing > 0:
        warnings.warn(
            f"{nmissing} b-hadron candidate(s) without decay vertex skipped",
            MissingDecayVertex,
        )
    cand = cand[~novtx]
    daughters = cand.daughterPdgId
    last_b = ak.fill_none(
        (ak.num(daughters, axis=2) > 0) & ~ak.any(has_bottom(daughters), axis=2),
        False,
    )
    return cand[last_b], nmissing


@nb.njit
def greedy_bjet_match(jet_rap, jet_phi, bhad_rap, bhad_phi, max_dr, builder):
    # jets are visited in their given order, a matched hadron cannot be reused
    for iev in range(len(jet_rap)):
        jrap = jet_rap[iev]
        jphi = jet_phi[iev]
        brap = bhad_rap[iev]
        bphi = bhad_phi[iev]
        used = np.zeros(len(brap), dtype=np.bool_)
        builder.begin_list()
        for ij in range(len(jrap)):
            drmin = 1000.0
            bfound = -1
            for ib in range(len(brap)):
                if used[ib]:
                    continue
                dphi = (bphi[ib] - jphi[ij] + math.pi) % (2 * math.pi) - math.pi
                dr = math.sqrt((brap[ib] - jrap[ij]) ** 2 + dphi**2)
                if dr < drmin:
                    drmin = dr
                    bfound = ib
            if bfound >= 0 and drmin < max_dr:
                used[bfound] = True
                builder.integer(bfound)
            else:
                builder.integer(-1)
        builder.end_list()

    return builder


def associate_bhadrons(jets, bhadrons, max_dr=0.4, central_rapmax=2.4):
    """
    Label jets as light / central-b / forward-b by greedy nearest-unused
    b-hadron matching in jet order.

    Returns the jets with `bhadIdx` (-1 for light jets), `bhadCharge`
    (0 for light jets) and `label` fields added.
    """
    bhadidx = greedy_bjet_match(
        ak.values_astype(jets.rap, np.float64),
        ak.values_astype(jets.phi, np.float64),
        ak.values_astype(bhadrons.rap, np.float64),
        ak.values_astype(bhadrons.phi, np.float64),
        max_dr,
        ak.ArrayBuilder(),
    ).snapshot()
    bhadidx = ak.values_astype(bhadidx, np.int64)
    matched = bhadidx >= 0
    bhadcharge = ak.fill_none(bhadrons.charge[ak.mask(bhadidx, matched)], 0)
    label = ak.where(
        matched,
        ak.where(abs(jets.rap) < central_rapmax, CENTRAL_B, FORWARD_B),
        LIGHT,
    )
    jets = ak.with_field(jets, bhadidx, "bhadIdx")
    jets = ak.with_field(jets, bhadcharge, "bhadCharge")
    jets = ak.with_field(jets, label, "label")
    return jets
