import awkward as ak
import numpy as np

PARTICLE_FIELDS = {
    "pt": np.float64,
    "eta": np.float64,
    "phi": np.float64,
    "mass": np.float64,
    "pdgId": np.int64,
}
LEPTON_FIELDS = {
    **PARTICLE_FIELDS,
    "barePt": np.float64,
    "bareEta": np.float64,
    "barePhi": np.float64,
    "bareMass": np.float64,
}
JET_FIELDS = {
    "pt": np.float64,
    "eta": np.float64,
    "phi": np.float64,
    "mass": np.float64,
}
UNSTABLE_FIELDS = {**PARTICLE_FIELDS, "charge": np.float64}


def particle(pt, eta, phi, pdgId=211, mass=0.0):
    return {"pt": pt, "eta": eta, "phi": phi, "mass": mass, "pdgId": pdgId}


def lepton(pt, eta, phi, pdgId, bare=None):
    lep = particle(pt, eta, phi, pdgId)
    bpt, beta, bphi = bare if bare is not None else (pt, eta, phi)
    lep.update({"barePt": bpt, "bareEta": beta, "barePhi": bphi, "bareMass": 0.0})
    return lep


def jet(pt, eta, phi, mass=0.0):
    return {"pt": pt, "eta": eta, "phi": phi, "mass": mass}


def hadron(pt, eta, phi, pdgId, charge, daughters):
    had = particle(pt, eta, phi, pdgId, mass=5.3)
    had.update({"charge": charge, "daughterPdgId": daughters})
    return had


def _daughters(events, counts):
    parts = [p["daughterPdgId"] for ev in events for p in ev]
    has_vtx = np.array([d is not None for d in parts], dtype=bool)
    lists = [d if d is not None else [] for d in parts]
    inner = ak.unflatten(
        np.array([x for d in lists for x in d], dtype=np.int64),
        np.array([len(d) for d in lists], dtype=np.int64),
    )
    if not np.all(has_vtx):
        inner = ak.mask(inner, has_vtx)
    return ak.unflatten(inner, counts)


def collection(events, fields):
    """Typed jagged collection from per-event lists of particle dicts"""
    counts = np.array([len(ev) for ev in events], dtype=np.int64)
    out = {}
    for name, dtype in fields.items():
        flat = np.array([p[name] for ev in events for p in ev], dtype=dtype)
        out[name] = ak.unflatten(flat, counts)
    if fields is UNSTABLE_FIELDS:
        out["daughterPdgId"] = _daughters(events, counts)
    return ak.zip(out, depth_limit=2)


def make_event(
    leptons=[], jets=[], visible=None, neutrinos=[], unstable=[], genWeight=1.0
):
    if visible is None:
        visible = [
            particle(l["barePt"], l["bareEta"], l["barePhi"], l["pdgId"])
            for l in leptons
        ]
    return {
        "leptons": leptons,
        "jets": jets,
        "visible": visible,
        "neutrinos": neutrinos,
        "unstable": unstable,
        "genWeight": genWeight,
    }


def make_events(events):
    return ak.zip(
        {
            "genWeight": np.array([ev["genWeight"] for ev in events], dtype=np.float64),
            "GenDressedLepton": collection(
                [ev["leptons"] for ev in events], LEPTON_FIELDS
            ),
            "GenVisPart": collection([ev["visible"] for ev in events], PARTICLE_FIELDS),
            "GenNeutrino": collection(
                [ev["neutrinos"] for ev in events], PARTICLE_FIELDS
            ),
            "GenJet": collection([ev["jets"] for ev in events], JET_FIELDS),
            "GenUnstable": collection(
                [ev["unstable"] for ev in events], UNSTABLE_FIELDS
            ),
        },
        depth_limit=1,
    )


## the WBF reference event: mu+ (pT 40) and e- (pT 30), two forward-backward jets
def wbf_leptons(mu_charge=1, ele_charge=-1):
    return [
        lepton(40.0, 0.0, 0.0, -13 * mu_charge),
        lepton(30.0, 0.5, 2.5, -11 * ele_charge),
    ]


def wbf_jets():
    return [jet(120.0, -2.0, -1.0), jet(100.0, 2.0, -2.0)]


def wbf_event(leptons=None, jets=None, **kwargs):
    leptons = wbf_leptons() if leptons is None else leptons
    jets = wbf_jets() if jets is None else jets
    visible = [
        particle(l["barePt"], l["bareEta"], l["barePhi"], l["pdgId"]) for l in leptons
    ] + [particle(j["pt"], j["eta"], j["phi"]) for j in jets]
    return make_event(leptons=leptons, jets=jets, visible=visible, **kwargs)
