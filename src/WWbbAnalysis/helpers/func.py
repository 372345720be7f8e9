import awkward as ak
import numpy as np
from coffea.nanoevents.methods import vector

ak.behavior.update(vector.behavior)

## invisible species, excluded from the visible momentum sum
invisible_pdgid = [12, 14, 16]


def flatten(ar):  # flatten awkward into a 1d array to hist
    return ak.flatten(ar, axis=None)


def rapidity(obj):
    """Rapidity of (pt, eta, mass) objects, y = asinh(pz / mT)"""
    mt = np.sqrt(obj.pt**2 + obj.mass**2)
    return np.arcsinh(obj.pt * np.sinh(obj.eta) / mt)


def delta_phi(phi1, phi2):
    return (phi1 - phi2 + np.pi) % (2 * np.pi) - np.pi


def delta_r_rap(a, b):
    """Angular distance in (rapidity, azimuth) space, both objects need a `rap` field"""
    return np.hypot(a.rap - b.rap, delta_phi(a.phi, b.phi))


def to_vector(obj, extras=()):
    """Zip a collection into PtEtaPhiMLorentzVector records carrying their rapidity"""
    fields = {
        "pt": obj.pt,
        "eta": obj.eta,
        "phi": obj.phi,
        "mass": obj.mass,
    }
    fields["rap"] = rapidity(obj)
    for e in extras:
        fields[e] = obj[e]
    return ak.zip(
        fields,
        with_name="PtEtaPhiMLorentzVector",
        behavior=vector.behavior,
        depth_limit=2,
    )


def sort_by_pt(obj):
    return obj[ak.argsort(obj.pt, axis=-1, ascending=False)]


def missing_momentum(visible):
    """Negative vector sum of the visible transverse momentum, as a massless vector"""
    isvisible = ak.ones_like(visible.pdgId, dtype=bool)
    for pid in invisible_pdgid:
        isvisible = isvisible & (abs(visible.pdgId) != pid)
    visible = visible[isvisible]
    met_x = -ak.sum(visible.pt * np.cos(visible.phi), axis=-1)
    met_y = -ak.sum(visible.pt * np.sin(visible.phi), axis=-1)
    return ak.zip(
        {
            "pt": np.hypot(met_x, met_y),
            "eta": ak.zeros_like(met_x),
            "phi": np.arctan2(met_y, met_x),
            "mass": ak.zeros_like(met_x),
        },
        with_name="PtEtaPhiMLorentzVector",
        behavior=vector.behavior,
    )


def transverse_mass(ll, met):
    # m_T of a visible system (ll) and the missing momentum
    et_ll = np.sqrt(ll.pt**2 + ll.mass**2)
    px = ll.x + met.pt * np.cos(met.phi)
    py = ll.y + met.pt * np.sin(met.phi)
    mt2 = (et_ll + met.pt) ** 2 - (px**2 + py**2)
    return np.sqrt(np.maximum(mt2, 0.0))
