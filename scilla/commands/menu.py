"""Menu command - Interactive loop over the config commands."""

from scilla.commands.config import ConfigCommand
from scilla.core.context import CommandExec, ScillaContext
from scilla.core.errors import PromptError, ScillaError
from scilla.core.logging_config import get_logger
from scilla.core.prompts import ask_choice, console, print_error, print_header

log = get_logger(__name__)


def run_config_menu(ctx: ScillaContext) -> CommandExec:
    """Keep offering config commands until the user picks Go Back."""
    commands = list(ConfigCommand)
    print_header("Scilla Configuration")

    while True:
        command = commands[ask_choice("What would you like to do?", [c.label for c in commands])]
        console.print(f"[dim]{command.spinner_msg()}[/dim]")

        try:
            outcome = command.process_command(ctx)
        except PromptError:
            raise
        except ScillaError as e:
            log.info("%s failed: %s", command.label, e)
            print_error(str(e))
            continue

        if outcome is CommandExec.GO_BACK:
            return outcome
