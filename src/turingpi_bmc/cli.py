"""CLI interface for querying a Turing Pi 2 BMC."""

import json
import logging
import sys

import click
import requests
from urllib3.exceptions import InsecureRequestWarning

from .client import BMCClient
from .const import DEFAULT_BASE_URL
from .exceptions import BMCError
from .models import AuthType, OtherInfo


def format_other_output(info: OtherInfo, format: str = "text") -> str:
    """
    Format BMC details for display.

    Args:
        info: Details returned by BMCClient.get_other
        format: Output format ('text' or 'json')

    Returns:
        Formatted string output
    """
    if format.lower() == "json":
        return json.dumps(info.to_dict(), indent=2)

    lines = [
        f"API: {info.api}",
        f"Build Version: {info.build_version}",
        f"Buildroot: {info.buildroot}",
        f"Buildtime: {info.buildtime}",
        f"IP: {info.ip}",
        f"MAC: {info.mac}",
        f"Version: {info.version}",
    ]
    return "\n".join(lines)


@click.command()
@click.argument("username")
@click.argument("password")
@click.option(
    "--host",
    envvar="TPI_HOST",
    default=DEFAULT_BASE_URL,
    show_default=True,
    help="BMC base URL",
)
@click.option(
    "--auth-type",
    envvar="TPI_AUTH_TYPE",
    type=click.Choice([auth.value for auth in AuthType]),
    default=AuthType.BEARER.value,
    show_default=True,
    help="Authentication scheme",
)
@click.option(
    "--verify-ssl/--no-verify-ssl",
    default=False,
    help="Verify SSL certificates (default: no, the BMC ships a self-signed one)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Log requests to stderr")
@click.version_option(package_name="turingpi-bmc")
def main(
    username: str,
    password: str,
    host: str,
    auth_type: str,
    verify_ssl: bool,
    output_format: str,
    verbose: bool,
) -> None:
    """Connect to a Turing Pi 2 BMC and print its firmware details."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    session = requests.Session()
    session.verify = verify_ssl
    if not verify_ssl:
        requests.packages.urllib3.disable_warnings(InsecureRequestWarning)

    try:
        client = BMCClient(host, auth_type, username, password, session=session)
        info = client.get_other()
    except BMCError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        session.close()

    click.echo(format_other_output(info, format=output_format))


if __name__ == "__main__":
    main()
