"""API wrapper for the CollectiveStorage contract."""

from dataclasses import dataclass
from typing import Any

from collective.chain.binding import ContractBinding, bind
from collective.chain.codec import decode_short_name, parse_int_or_throw
from collective.chain.wallet import Wallet
from collective.errors import DecodingError


@dataclass(frozen=True)
class Choice:
    """A choice on a choice vote."""

    name: str
    description: str
    transaction_id: int
    vote_count: int


class CollectiveStorage:
    """Read access to proposal state."""

    ABI_NAME = "Storage.json"

    def __init__(self, binding: ContractBinding):
        self.binding = binding

    @classmethod
    def connect(cls, contract_address: str, web3: Any, wallet: Wallet | None, **kwargs: Any) -> "CollectiveStorage":
        return cls(bind(cls.ABI_NAME, contract_address, web3, wallet, **kwargs))

    async def name(self) -> str:
        return await self.binding.call("name")

    async def version(self) -> int:
        return parse_int_or_throw(await self.binding.call("version"))

    async def _int(self, method: str, *args: Any) -> int:
        return parse_int_or_throw(await self.binding.call(method, *args))

    async def quorum_required(self, proposal_id: int) -> int:
        """Quorum required for the vote to pass."""
        return await self._int("quorumRequired", proposal_id)

    async def vote_delay(self, proposal_id: int) -> int:
        """Delay before voting starts, in seconds."""
        return await self._int("voteDelay", proposal_id)

    async def vote_duration(self, proposal_id: int) -> int:
        """Length of the vote, in seconds."""
        return await self._int("voteDuration", proposal_id)

    async def start_time(self, proposal_id: int) -> int:
        """Vote start, seconds since the unix epoch."""
        return await self._int("startTime", proposal_id)

    async def end_time(self, proposal_id: int) -> int:
        """Vote end, seconds since the unix epoch."""
        return await self._int("endTime", proposal_id)

    async def get_winning_choice(self, proposal_id: int) -> int:
        return await self._int("getWinningChoice", proposal_id)

    async def choice_count(self, proposal_id: int) -> int:
        return await self._int("choiceCount", proposal_id)

    async def get_choice(self, proposal_id: int, choice_id: int) -> Choice:
        """Get the parameterization of one choice."""
        result = await self.binding.call("getChoice", proposal_id, choice_id)
        try:
            name, description, transaction_id, vote_count = result
        except (TypeError, ValueError) as e:
            raise DecodingError(f"Choice returned invalid data: {result!r}") from e
        return Choice(
            name=decode_short_name(name),
            description=description,
            transaction_id=parse_int_or_throw(transaction_id),
            vote_count=parse_int_or_throw(vote_count),
        )
