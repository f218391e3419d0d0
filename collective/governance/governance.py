"""API wrapper for the CollectiveGovernance contract."""

from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import encode_short_name, parse_int_or_throw
from collective.chain.events import extract_field
from collective.chain.wallet import Wallet


class CollectiveGovernance:
    """Proposal lifecycle and voting.

    Governance and its vote strategy live at the same address but are
    described by separate ABIs, so two bindings are held.
    """

    ABI_NAME = "Governance.json"
    STRAT_NAME = "VoteStrategy.json"

    def __init__(self, binding: ContractBinding, strategy: ContractBinding):
        self.binding = binding
        self.strategy = strategy
        self.logger = binding.logger

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "CollectiveGovernance":
        return cls(
            bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs),
            bind(cls.STRAT_NAME, contract_address, web3, wallet, **kwargs),
        )

    async def name(self) -> str:
        return await self.binding.call("name")

    async def version(self) -> int:
        return parse_int_or_throw(await self.binding.call("version"))

    async def propose(self) -> int:
        """Propose a new vote and return the proposal id."""
        self.logger.debug("Propose new vote")
        outcome = await self.binding.transact("propose")
        return parse_int_or_throw(extract_field(outcome, "ProposalCreated", "proposalId"))

    async def add_choice(self, proposal_id: int, name: str, description: str, transaction_id: int) -> int:
        """Set a choice on a choice vote.

        Args:
            proposal_id: The id of the vote
            name: Choice name, at most 32 bytes
            description: Choice description
            transaction_id: Attached transaction executed if this choice wins

        Returns:
            The id of the choice
        """
        self.logger.info(f"choice: {proposal_id}, {name}, {description}, {transaction_id}")
        outcome = await self.binding.transact(
            "setChoice", proposal_id, encode_short_name(name), description, transaction_id
        )
        return parse_int_or_throw(extract_field(outcome, "ProposalChoice", "_choiceId"))

    async def attach_transaction(
        self,
        proposal_id: int,
        target: str,
        value: int,
        signature: str,
        calldata: bytes,
        eta_of_lock: int,
    ) -> int:
        """Attach a transaction to the vote.

        Args:
            proposal_id: The id of the vote
            target: Address to call
            value: Amount of wei to send, may be 0
            signature: Function signature of the call
            calldata: ABI encoded arguments
            eta_of_lock: Expected execution time

        Returns:
            The id of the attached transaction
        """
        self.logger.debug(f"attach: {proposal_id}, {target}, {value}, {signature}, {calldata!r}, {eta_of_lock}")
        outcome = await self.binding.transact(
            "attachTransaction", proposal_id, target, value, signature, calldata, eta_of_lock
        )
        return parse_int_or_throw(extract_field(outcome, "ProposalTransactionAttached", "transactionId"))

    async def configure(self, proposal_id: int, quorum: int) -> None:
        self.logger.debug(f"configure vote: {proposal_id}, {quorum}")
        await self.binding.transact("configure", proposal_id, quorum)

    async def configure_with_delay(
        self,
        proposal_id: int,
        quorum: int,
        required_delay: int,
        required_duration: int,
    ) -> None:
        """Configure a vote along with its minimum delay and duration in seconds."""
        self.logger.debug(f"configure vote: {proposal_id}, {quorum}, {required_delay}, {required_duration}")
        await self.binding.transact("configure", proposal_id, quorum, required_delay, required_duration)

    async def is_open(self, proposal_id: int) -> bool:
        return await self.binding.call("isOpen", proposal_id)

    async def start_vote(self, proposal_id: int) -> None:
        self.logger.debug(f"start vote: {proposal_id}")
        await self.binding.transact("startVote", proposal_id)

    async def end_vote(self, proposal_id: int) -> None:
        self.logger.debug(f"end vote: {proposal_id}")
        await self.binding.transact("endVote", proposal_id)

    async def cancel(self, proposal_id: int) -> None:
        """Cancel a vote before it starts."""
        self.logger.debug(f"cancel: {proposal_id}")
        await self.binding.transact("cancel", proposal_id)

    async def veto(self, proposal_id: int) -> None:
        self.logger.debug(f"veto: {proposal_id}")
        await self.strategy.transact("veto", proposal_id)

    async def vote_for(self, proposal_id: int) -> None:
        """Vote in favor with all shares."""
        self.logger.debug(f"vote for: {proposal_id}")
        await self.strategy.transact("voteFor", proposal_id)

    async def vote_choice(self, proposal_id: int, choice_id: int) -> None:
        self.logger.debug(f"vote choice: {proposal_id} - {choice_id}")
        await self.strategy.transact("voteChoice", proposal_id, choice_id)

    async def vote_for_with_token(self, proposal_id: int, token_id: int) -> None:
        self.logger.debug(f"vote for with token: {proposal_id}, {token_id}")
        await self.strategy.transact("voteFor", proposal_id, token_id)

    async def vote_against(self, proposal_id: int) -> None:
        """Vote against with all shares."""
        self.logger.debug(f"vote against: {proposal_id}")
        await self.strategy.transact("voteAgainst", proposal_id)

    async def vote_against_with_token(self, proposal_id: int, token_id: int) -> None:
        self.logger.debug(f"vote against with token: {proposal_id}, {token_id}")
        await self.strategy.transact("voteAgainst", proposal_id, token_id)

    async def abstain_from(self, proposal_id: int) -> None:
        """Abstain with all shares."""
        self.logger.debug(f"abstainFrom: {proposal_id}")
        await self.strategy.transact("abstainFrom", proposal_id)

    async def abstain_with_token(self, proposal_id: int, token_id: int) -> None:
        self.logger.debug(f"abstain for {proposal_id}, {token_id}")
        await self.strategy.transact("abstainFrom", proposal_id, token_id)

    async def vote_succeeded(self, proposal_id: int) -> bool:
        return await self.strategy.call("getVoteSucceeded", proposal_id)
