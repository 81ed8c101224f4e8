"""
awsinfo CLI - EC2 Instance Reporter

Main entry point for the command-line interface.
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.aws_client import AWSClient
from .core.clients import list_clients, load_credentials
from .core.config import OUTPUT_FORMATS, Settings
from .core.dns import DigResolver
from .core.exceptions import AWSInfoError, NoMatchingInstancesError
from .core.filters import classify
from .core.logging import get_logger, setup_logging
from .reporters.cli_reporter import CLIReporter
from .reporters.json_reporter import JSONReporter
from .scanners.instance_scanner import InstanceScanner

EXIT_INTERRUPTED = 130

console = Console()
error_console = Console(stderr=True)

logger = get_logger(__name__)


def run(settings: Settings, out: Optional[Console] = None) -> int:
    """
    Execute one invocation and return its exit status.

    All awsinfo errors end up here and are mapped to exit codes:
    configuration errors to 2, API failures to 1 and an empty filter
    match to 0.
    """
    cli_reporter = CLIReporter(out or console)

    try:
        if settings.list_clients:
            cli_reporter.print_clients(list_clients(settings.clients_dir))
            return 0

        credential = load_credentials(settings.client, settings.clients_dir)
        aws_client = AWSClient(
            credential,
            region=settings.region,
            max_attempts=settings.max_attempts,
            timeout=settings.api_timeout,
        )
        scanner = InstanceScanner(
            aws_client,
            resolver=DigResolver(settings.dig_command, timeout=settings.dns_timeout),
        )

        if settings.is_detail:
            result = scanner.describe_instance(classify(settings.filter_text))
        else:
            result = scanner.list_instances()

        if settings.output_format == "json":
            json_reporter = JSONReporter(
                output_path=settings.output_path,
                client=settings.client,
                region=settings.region,
            )
            if settings.output_path:
                json_reporter.report(result)
            else:
                click.echo(json_reporter.to_string(result))
        elif settings.is_detail:
            cli_reporter.report_detail(result)
        else:
            cli_reporter.report_summary(result)
        return 0

    except NoMatchingInstancesError as e:
        # Shown regardless of --log-level
        error_console.print(
            f"[cyan]INFO:[/cyan] {escape(e.message)}", highlight=False, soft_wrap=True
        )
        return e.exit_code
    except AWSInfoError as e:
        error_console.print(
            f"[red bold]ERROR:[/red bold] {escape(e.message)}", highlight=False, soft_wrap=True
        )
        return e.exit_code
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Cancelled by user.[/yellow]")
        return EXIT_INTERRUPTED


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="awsinfo")
@click.option(
    "--client",
    "-c",
    default=None,
    help="Client whose credential file to use (required unless -l)",
)
@click.option(
    "--list",
    "-l",
    "list_clients_flag",
    is_flag=True,
    help="List known clients and exit",
)
@click.option(
    "--filter",
    "-f",
    "filter_text",
    default=None,
    help="Show one instance: an instance id, an IPv4 address or a tag value",
)
@click.option(
    "--clients-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory of client credential files (env: AWSINFO_CLIENTS_DIR)",
)
@click.option(
    "--region",
    "-r",
    default=None,
    help="AWS region to query (env: AWSINFO_REGION, default: us-east-1)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    default=None,
    help="Write JSON output to this file instead of stdout",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Diagnostic verbosity (default: INFO)",
)
@click.option(
    "--log-file",
    default=None,
    help="Also write diagnostics to this file",
)
@click.option(
    "--timeout",
    "api_timeout",
    type=click.IntRange(min=1),
    default=None,
    help="EC2 connect/read timeout in seconds (default: 30)",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=None,
    help="Attempts per EC2 call; 1 disables retries (default: 1)",
)
def cli(
    client: Optional[str],
    list_clients_flag: bool,
    filter_text: Optional[str],
    clients_dir: Optional[str],
    region: Optional[str],
    output_format: str,
    output_path: Optional[str],
    log_level: str,
    log_file: Optional[str],
    api_timeout: Optional[int],
    max_attempts: Optional[int],
):
    """
    Report on EC2 instances for a named client account.

    Without -f, lists every instance with its type, state, IP and name.
    With -f, shows one instance in detail: security groups, reverse DNS
    and each attached volume with its snapshot count.

    Examples:

        # List configured clients
        awsinfo -l

        # Summarize all instances for a client
        awsinfo -c acme

        # Detail by instance id, IP address or tag value
        awsinfo -c acme -f i-0abc1234
        awsinfo -c acme -f 203.0.113.7
        awsinfo -c acme -f web-01

        # Machine-readable output
        awsinfo -c acme --format json -o acme.json
    """
    if not list_clients_flag and not client:
        raise click.UsageError("Missing option '-c' / '--client' (required unless -l is given).")

    settings = Settings.from_options(
        clients_dir=clients_dir,
        region=region,
        client=client,
        filter_text=filter_text,
        list_clients=list_clients_flag,
        output_format=output_format,
        output_path=output_path,
        log_level=log_level.upper(),
        log_file=log_file,
        api_timeout=api_timeout,
        max_attempts=max_attempts,
    )
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.debug(f"Running with {settings}")

    sys.exit(run(settings))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
