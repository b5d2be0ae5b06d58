import click

autosign_option = click.option(
    "--autosign",
    help="Automatically sign transactions and skip deployment confirmations.",
    is_flag=True,
)

verify_option = click.option(
    "--verify",
    help="Publish the deployed contracts to the network's block explorer.",
    is_flag=True,
)
