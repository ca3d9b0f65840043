"""Node search CLI - query Harmony scene snapshots."""

import typer
from dotenv import load_dotenv

from openharmony import __version__
from openharmony.logging_config import setup_logging
from cli.common import console
from cli.search import app as search_app

# Load environment variables and setup logging
load_dotenv()
setup_logging()

# Create the main app
app = typer.Typer(
    name="nodesearch",
    help="Query the node graph of Harmony scene snapshots",
    add_completion=False,
)

# Add single commands as subcommands
app.command("search", help="Search nodes in a scene snapshot")(
    search_app.registered_commands[0].callback
)
app.command("selected", help="List the selected nodes of a scene snapshot")(
    search_app.registered_commands[1].callback
)
app.command("parse", help="Show how a query is parsed")(
    search_app.registered_commands[2].callback
)


@app.command("version")
def version():
    """Show the node search version."""
    console.print(f"nodesearch {__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
