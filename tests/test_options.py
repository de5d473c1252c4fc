import click
from click.testing import CliRunner

from deployment.constants import NetworkId
from deployment.options import autosign_option, target_network_option


@click.command()
@target_network_option
@autosign_option
def echo_options(target_network, autosign):
    click.echo(f"{target_network.name} {int(target_network)} {autosign}")


def test_target_network_defaults_to_avalanche():
    result = CliRunner().invoke(echo_options, [])
    assert result.exit_code == 0
    assert result.output == "AVALANCHE 43114 False\n"


def test_target_network_is_case_insensitive():
    result = CliRunner().invoke(echo_options, ["--target-network", "fuji", "--autosign"])
    assert result.exit_code == 0
    assert result.output == f"FUJI {int(NetworkId.FUJI)} True\n"


def test_unknown_target_network_is_rejected():
    result = CliRunner().invoke(echo_options, ["-t", "mainnet"])
    assert result.exit_code != 0
