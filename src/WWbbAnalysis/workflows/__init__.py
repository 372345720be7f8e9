from functools import partial

from WWbbAnalysis.workflows.WWbb import NanoProcessor as WWbbProcessor

workflows = {}
workflows["WWbb"] = WWbbProcessor
# WBF with the tag-jet b-veto (cut stage 4) enabled
workflows["WWbb_tagjet_bveto"] = partial(
    WWbbProcessor, cuts={"WBF": {"veto_btagged_tagjets": True}}
)
