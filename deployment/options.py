import click

from deployment.constants import DEFAULT_NETWORK, NetworkId, SUPPORTED_NETWORKS


class NetworkIdChoice(click.Choice):
    """Accepts a network name (case-insensitive) and converts it to a NetworkId."""

    name = "network_id"

    def __init__(self):
        super().__init__(SUPPORTED_NETWORKS, case_sensitive=False)

    def convert(self, value, param, ctx):
        if isinstance(value, NetworkId):
            return value
        choice = super().convert(value, param, ctx)
        return NetworkId[choice]


target_network_option = click.option(
    "--target-network",
    "-t",
    help="Network whose token and treasury addresses are used as constructor arguments.",
    type=NetworkIdChoice(),
    default=DEFAULT_NETWORK.name,
    show_default=True,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions and skip confirmation prompts.",
    is_flag=True,
    default=False,
)

registry_option = click.option(
    "--registry",
    "-r",
    help="Record the deployment in the network's registry file.",
    is_flag=True,
    default=False,
)
