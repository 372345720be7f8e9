import copy

selection_config = {
    "default": {
        ## leptons, dressing radius 0.1 and bare |eta| < 2.6 applied upstream
        "lepton_etamax": 2.4,
        "lepton_ptmin": 25.0,
        "lepton_iso_dR": 0.4,
        "lepton_iso_frac": 0.1,
        ## jets, anti-kt R=0.4
        "jet_etamax": 4.5,
        "jet_ptmin": 25.0,
        "lepton_jet_isolation_dR": 0.4,
        ## b-hadron labelling
        "bhad_ptmin": 5.0,
        "bjet_dR": 0.4,
        "bjet_central_rapmax": 2.4,
        ## channels
        "WBF": {
            "massJJ_min": 0.0,
            "deltayJJ_min": 0.0,
            "m_trans_llMET_min": 0.0,
            "m_ll_min": 0.0,
            "ptlep1_min": 0.0,
            "ptlep2_min": 0.0,
            "MET_min": 0.0,
            # tag-jet b-veto, cut stage 4
            "veto_btagged_tagjets": False,
        },
    },
}


def load_config(selectionModifier="default", cuts=None):
    """Selection preset with the `cuts` overrides merged on top, one level deep for channel blocks"""
    if selectionModifier not in selection_config:
        raise ValueError(
            f"Selection {selectionModifier} not found in {selection_config.keys()}. Check utils/WWbb_parameters.py"
        )
    config = copy.deepcopy(selection_config[selectionModifier])
    if cuts is None:
        return config
    for key, value in cuts.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value
    return config
