"""Governance contract wrappers."""

from collective.governance.builder import ContractAddress, GovernanceBuilder
from collective.governance.governance import CollectiveGovernance
from collective.governance.meta import MetaEntry, MetaStorage
from collective.governance.proposal import ProposalBuilder
from collective.governance.storage import Choice, CollectiveStorage
from collective.governance.system import System
from collective.governance.voter_class import VoterClassFactory

__all__ = [
    "ContractAddress",
    "GovernanceBuilder",
    "CollectiveGovernance",
    "MetaEntry",
    "MetaStorage",
    "ProposalBuilder",
    "Choice",
    "CollectiveStorage",
    "System",
    "VoterClassFactory",
]
