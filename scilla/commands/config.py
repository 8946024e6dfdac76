"""Config command - Show, generate and edit the Scilla configuration."""

import os
import subprocess
from enum import Enum

from rich.table import Table
from rich.text import Text

from scilla.core.config import (
    COMMITMENT_LEVELS,
    CUSTOM_RPC,
    DEFAULT_EDITOR,
    DEFAULT_KEYPAIR_PATH,
    EDITOR_ENV,
    RPC_PRESETS,
    dump_config,
    format_value,
    get_config_path,
    load_config,
    save_config,
)
from scilla.core.context import CommandExec, ScillaContext
from scilla.core.errors import EditorLaunchError
from scilla.core.logging_config import get_logger
from scilla.core.prompts import (
    ask_choice,
    ask_question,
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

log = get_logger(__name__)


class ConfigCommand(Enum):
    """Commands related to configuration like the RPC URL and keypair path."""

    SHOW = "Show"
    GENERATE = "Generate"
    EDIT = "Edit"
    GO_BACK = "Go Back"

    @property
    def label(self) -> str:
        return self.value

    def spinner_msg(self) -> str:
        if self is ConfigCommand.SHOW:
            return "Displaying current Scilla configuration…"
        if self is ConfigCommand.GENERATE:
            return "Generating new Scilla configuration…"
        if self is ConfigCommand.EDIT:
            return "Editing existing Scilla configuration…"
        return "Going back…"

    def process_command(self, ctx: ScillaContext) -> CommandExec:
        """Run the handler for this command and report what the menu should do next."""
        if self is ConfigCommand.SHOW:
            return show_config(ctx)
        if self is ConfigCommand.GENERATE:
            return generate_config(ctx)
        if self is ConfigCommand.EDIT:
            return edit_config(ctx)
        return CommandExec.GO_BACK


def show_config(ctx: ScillaContext) -> CommandExec:
    """Render every top-level setting of the config file as a table."""
    config_path = get_config_path()
    log.debug("Showing config from %s", config_path)

    if not config_path.exists():
        print_warning(f"No configuration found at {config_path}")
        print_info("Run: scilla config generate")
        return CommandExec.PROCESS

    config = load_config(config_path)

    table = Table(title="Scilla Configuration")
    table.add_column("Setting", style="bold cyan")
    table.add_column("Value")
    for key, value in config.items():
        table.add_row(Text(key), Text(format_value(value)))

    console.print(table)
    print_info(f"Config file: {config_path}")
    return CommandExec.PROCESS


def _ask_rpc_url() -> str:
    networks = [*RPC_PRESETS, CUSTOM_RPC]
    network = networks[ask_choice("Select RPC endpoint:", networks)]

    if network != CUSTOM_RPC:
        return RPC_PRESETS[network]

    while True:
        rpc_url = ask_question("Custom RPC URL")
        if rpc_url:
            return rpc_url
        print_error("RPC URL cannot be empty")


def generate_config(ctx: ScillaContext) -> CommandExec:
    """Prompt for the RPC URL, keypair path and commitment level, then write them.

    Any existing file is replaced in full; nothing from it is kept.
    """
    config_path = get_config_path()

    rpc_url = _ask_rpc_url()
    keypair_path = ask_question("Keypair path", DEFAULT_KEYPAIR_PATH)
    commitment_level = COMMITMENT_LEVELS[ask_choice("Select commitment level:", COMMITMENT_LEVELS)]
    log.info("Generating config: rpc_url=%s commitment=%s", rpc_url, commitment_level)

    save_config(config_path, dump_config(rpc_url, keypair_path, commitment_level))
    print_success(f"Config generated at {config_path}")
    return CommandExec.PROCESS


def edit_config(ctx: ScillaContext) -> CommandExec:
    """Open the config file in $EDITOR and wait for it to exit."""
    config_path = get_config_path()
    editor = os.environ.get(EDITOR_ENV) or DEFAULT_EDITOR

    print_info(f"Opening {config_path} in {editor}...")
    log.debug("Launching editor %r on %s", editor, config_path)
    try:
        result = subprocess.run([editor, str(config_path)])
    except OSError as e:
        raise EditorLaunchError(editor, e) from e

    if result.returncode != 0:
        log.warning("Editor %s exited with status %d", editor, result.returncode)

    print_success("Config updated")
    return CommandExec.PROCESS
