"""Interactive prompts for gwf.

Commands ask for missing values through the Prompter protocol so the workflow
can be driven by a terminal (TyperPrompter) or by scripted answers in tests.
"""

import difflib
from typing import Protocol

import typer


class Prompter(Protocol):
    """Capability interface for interactive input."""

    def choose(self, label: str, options: list[str]) -> str:
        """Pick one of options, or return free text the user typed instead."""
        ...

    def text(self, label: str, allow_empty: bool = False) -> str:
        """Ask for a line of free text."""
        ...


def match_choice(answer: str, options: list[str]) -> str:
    """Resolve a typed answer against a list of options.

    Accepts a 1-based option number, an exact (case-insensitive) option, or a
    close fuzzy match. Anything else is returned unchanged as free text.

    Args:
        answer: What the user typed.
        options: Offered options.

    Returns:
        The selected option, or the stripped answer itself.
    """
    answer = answer.strip()
    if not answer:
        return answer

    if answer.isdigit():
        index = int(answer)
        if 1 <= index <= len(options):
            return options[index - 1]

    lowered = {option.lower(): option for option in options}
    if answer.lower() in lowered:
        return lowered[answer.lower()]

    # Prefix match first ("ref" -> "refactor"), then edit distance ("feta" -> "feat")
    prefixed = [option for option in options if option.lower().startswith(answer.lower())]
    if len(prefixed) == 1:
        return prefixed[0]

    close = difflib.get_close_matches(answer.lower(), list(lowered), n=1, cutoff=0.75)
    if close:
        return lowered[close[0]]

    return answer


class TyperPrompter:
    """Terminal prompts built on typer."""

    def choose(self, label: str, options: list[str]) -> str:
        for i, option in enumerate(options, 1):
            typer.echo(f"  {i:>2}. {option}", err=True)
        while True:
            answer = typer.prompt(f"{label} (number, name or custom)", err=True)
            choice = match_choice(answer, options)
            if choice:
                return choice

    def text(self, label: str, allow_empty: bool = False) -> str:
        while True:
            answer = typer.prompt(label, default="" if allow_empty else None, show_default=False, err=True)
            answer = answer.strip()
            if answer or allow_empty:
                return answer
