"""Terminal output helpers and interactive prompts."""

from rich.console import Console
from rich.markup import escape

from scilla.core.errors import PromptError

console = Console(highlight=False, soft_wrap=True)


def print_header(text: str):
    """Bold title followed by an underline of the same width."""
    console.print(f"\n[bold magenta]{escape(text)}[/bold magenta]")
    console.print("=" * len(text))


def print_success(text: str):
    console.print(f"[green]✓ {escape(text)}[/green]")


def print_warning(text: str):
    console.print(f"[yellow]⚠ {escape(text)}[/yellow]")


def print_error(text: str):
    console.print(f"[red]✗ {escape(text)}[/red]")


def print_info(text: str):
    console.print(f"[cyan]ℹ {escape(text)}[/cyan]")


def _read(prompt: str) -> str:
    # Ctrl-C is left to the caller; only a closed stdin counts as an abort
    try:
        return input(prompt)
    except EOFError as e:
        raise PromptError("Input aborted") from e


def ask_question(prompt: str, default: str = "") -> str:
    """Read a free-text answer, exactly as typed.

    A blank answer (empty or whitespace only) yields ``default``.
    """
    full_prompt = f"{prompt} [{default}]: " if default else f"{prompt}: "

    value = _read(full_prompt)
    return value if value.strip() else default


def ask_choice(prompt: str, choices: list, default: int = 0) -> int:
    """Show a numbered list and return the zero-based index picked.

    Re-asks until the answer is blank (``default``) or a valid number.
    """
    console.print(f"\n{prompt}")
    for i, choice in enumerate(choices, 1):
        marker = "→" if i - 1 == default else " "
        console.print(f"  {marker} {i}. {escape(str(choice))}")

    while True:
        response = _read(f"\nSelect [1-{len(choices)}, default={default + 1}]: ").strip()
        if not response:
            return default
        try:
            choice = int(response) - 1
        except ValueError:
            print_error(f"'{response}' is not a number")
            continue
        if 0 <= choice < len(choices):
            return choice
        print_error(f"Pick a number from 1 to {len(choices)}")
