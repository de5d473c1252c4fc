from typing import Mapping

from ape.utils import ZERO_ADDRESS


def _ask(question: str) -> None:
    """Exits unless the operator agrees."""
    answer = input(f"{question} Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        exit(-1)


def confirm_continue() -> None:
    _ask("Continue")


def confirm_arguments(contract_name: str, arguments: Mapping[str, str]) -> None:
    """Shows the resolved constructor arguments and asks to deploy with them."""
    if not arguments:
        print(f"\n(i) No constructor arguments for {contract_name}")
    else:
        print(f"\nConstructor arguments for {contract_name}")
        for name, value in arguments.items():
            print(f"\t{name}={value}")
    _ask(f"Deploy {contract_name}")

    # zero addresses are valid table entries, but almost never intended on a live network
    if ZERO_ADDRESS in arguments.values():
        _ask("Zero Address detected for constructor argument; Continue?")
