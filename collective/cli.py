"""Command-line interface for collective."""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from collective.chain.binding import bind
from collective.chain.rpc import RPCClient
from collective.chain.wallet import Wallet
from collective.errors import CollectiveError
from collective.governance.builder import GovernanceBuilder
from collective.governance.meta import MetaStorage
from collective.governance.storage import CollectiveStorage
from collective.log import configure_logging
from collective.treasury.signature import Transaction, get_eth_signature, get_transaction_hash
from collective.treasury.vault import Treasury

app = typer.Typer(help="Collective governance contract client")
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="DEBUG, INFO, WARNING or ERROR"),
):
    configure_logging(log_level)


def _run(coro):
    """Run a coroutine, reporting package errors and exiting non-zero."""
    try:
        return asyncio.run(coro)
    except CollectiveError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def info(
    address: str = typer.Argument(..., help="Contract address"),
    abi: str = typer.Option(..., "--abi", "-a", help="ABI name, e.g. GovernanceBuilder"),
    rpc_url: Optional[str] = typer.Option(None, "--rpc", help="Custom RPC URL"),
):
    """Show the name and version of a deployed contract."""
    async def _info():
        async with RPCClient(rpc_url) as rpc:
            binding = bind(abi, address, rpc.w3, None)
            chain_id = await rpc.get_chain_id()
            name = await binding.call("name")
            version = await binding.call("version")
        return chain_id, name, version

    chain_id, name, version = _run(_info())
    console.print(f"[green]{name}[/green] version {version} on chain {chain_id}")


@app.command()
def discover(
    tx_hash: str = typer.Argument(..., help="Hash of the build or create transaction"),
    builder: str = typer.Option(..., "--builder", "-b", help="GovernanceBuilder address"),
    rpc_url: Optional[str] = typer.Option(None, "--rpc", help="Custom RPC URL"),
):
    """Discover the contracts created by a governance build."""
    async def _discover():
        async with RPCClient(rpc_url) as rpc:
            governance_builder = GovernanceBuilder.connect(builder, rpc.w3, None)
            return await governance_builder.discover_contract(tx_hash)

    addresses = _run(_discover())

    table = Table(title="Governance Contracts")
    table.add_column("Role", style="cyan")
    table.add_column("Address")
    table.add_row("governance", addresses.governance)
    table.add_row("storage", addresses.storage)
    table.add_row("meta", addresses.meta)
    table.add_row("timelock", addresses.timelock)
    console.print(table)


@app.command()
def community(
    meta: str = typer.Argument(..., help="MetaStorage address"),
    rpc_url: Optional[str] = typer.Option(None, "--rpc", help="Custom RPC URL"),
):
    """Show community metadata."""
    async def _community():
        async with RPCClient(rpc_url) as rpc:
            storage = MetaStorage.connect(meta, rpc.w3, None)
            return await storage.community(), await storage.url(), await storage.description()

    name, url, description = _run(_community())
    console.print(f"[bold]{name}[/bold]")
    console.print(url)
    console.print(description)


@app.command()
def proposal(
    storage: str = typer.Argument(..., help="Storage address"),
    proposal_id: int = typer.Argument(..., help="Proposal id"),
    rpc_url: Optional[str] = typer.Option(None, "--rpc", help="Custom RPC URL"),
):
    """Show the voting parameters of a proposal."""
    async def _proposal():
        async with RPCClient(rpc_url) as rpc:
            collective_storage = CollectiveStorage.connect(storage, rpc.w3, None)
            return {
                "quorum": await collective_storage.quorum_required(proposal_id),
                "delay": await collective_storage.vote_delay(proposal_id),
                "duration": await collective_storage.vote_duration(proposal_id),
                "start": await collective_storage.start_time(proposal_id),
                "end": await collective_storage.end_time(proposal_id),
                "choices": await collective_storage.choice_count(proposal_id),
            }

    details = _run(_proposal())

    table = Table(title=f"Proposal {proposal_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    for key, value in details.items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def treasury_balance(
    vault: str = typer.Argument(..., help="Treasury (Vault) address"),
    account: Optional[str] = typer.Option(None, "--account", help="Show the approved balance of this account"),
    rpc_url: Optional[str] = typer.Option(None, "--rpc", help="Custom RPC URL"),
):
    """Show the treasury balance, or the approved balance of an account."""
    async def _balance():
        async with RPCClient(rpc_url) as rpc:
            treasury = Treasury.connect(vault, rpc.w3, None)
            if account:
                return await treasury.balance(account)
            return await treasury.treasury_balance()

    balance = _run(_balance())
    console.print(f"{balance:,} wei")


@app.command()
def tx_hash(
    target: str = typer.Argument(..., help="Target address"),
    value: int = typer.Argument(..., help="Value in wei"),
    signature: str = typer.Argument(..., help="Function signature"),
    calldata: str = typer.Argument(..., help="Hex encoded calldata"),
    schedule_time: int = typer.Argument(..., help="Scheduled execution time"),
    sign: bool = typer.Option(False, "--sign", help="Also sign the hash with the configured key"),
):
    """Compute (and optionally sign) the hash of a treasury transaction."""
    try:
        transaction = Transaction(
            target=target,
            value=value,
            signature=signature,
            calldata=bytes.fromhex(calldata.removeprefix("0x")),
            schedule_time=schedule_time,
        )
        transaction_hash = get_transaction_hash(transaction)
        console.print(f"Hash: {transaction_hash}", soft_wrap=True)
        if sign:
            eth_signature = get_eth_signature(Wallet.from_private_key(), transaction_hash)
            console.print(f"Signature: {eth_signature}", soft_wrap=True)
    except (CollectiveError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    from collective import __version__
    console.print(f"collective version {__version__}")


if __name__ == "__main__":
    app()
