"""sensu-teams-handler command line entry point.

Usage:
    sensu-teams-handler --webhook-url https://example.webhook.office.com/... < event.json
"""

import logging
import sys
from typing import Annotated

import typer
from pydantic import ValidationError

from teams_handler.config import PLUGIN_NAME, load_settings
from teams_handler.errors import HandlerError
from teams_handler.handler import handle

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=PLUGIN_NAME,
    help="Sensu handler that sends event notifications to a Microsoft Teams channel",
    add_completion=False,
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.command()
def main(
    webhook_url: Annotated[
        str | None, typer.Option("--webhook-url", "-w", help="The webhook url to send messages to")
    ] = None,
    is_test: Annotated[bool, typer.Option("--is-test", "-t", help="Specify if this is a test run")] = False,
    sender: Annotated[
        str | None, typer.Option("--sender", "-s", help="The name that messages will be sent as")
    ] = None,
    sensu_url: Annotated[
        str | None, typer.Option("--sensu-url", "-u", help="The Sensu dashboard URL linked from the card")
    ] = None,
    description_template: Annotated[
        str | None,
        typer.Option("--description-template", "-d", help="The Teams notification output template"),
    ] = None,
    log_level: Annotated[str | None, typer.Option("--log-level", help="Logging level")] = None,
) -> None:
    """Read a Sensu event from stdin and post it to Teams."""
    try:
        settings = load_settings(
            webhook_url=webhook_url,
            is_test=True if is_test else None,
            sender=sender,
            sensu_url=sensu_url,
            description_template=description_template,
            log_level=log_level,
        )
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)

    configure_logging(settings.log_level)

    try:
        handle(sys.stdin, settings)
    except HandlerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Notification sent to Teams channel")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
