"""Loading, creating and prompting for the ignore file.

The ignore file holds one glob-lite rule per line. Blank lines and lines that
start with ``#`` are skipped. When no ignore file exists yet, the user is asked
whether to create one with the built-in defaults or with a custom list.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from dirtree.exceptions import IgnoreConfigError
from dirtree.ignore_rules.glob_rules import parse_ignore_lines
from dirtree.types import PathType

IGNORE_FILE_NAME = ".dirtree.ignore"

DEFAULT_IGNORES: Tuple[str, ...] = (
    "node_modules",
    ".git",
    ".svn",
    ".hg",
    "dist",
    "build",
    "out",
    "target",
    ".next",
    ".nuxt",
    "__pycache__",
    ".pytest_cache",
    "venv",
    "env",
    ".venv",
    ".env",
    "vendor",
    ".idea",
    ".vscode",
    "*.log",
    ".DS_Store",
    "Thumbs.db",
    "coverage",
    ".nyc_output",
    "tmp",
    "temp",
    ".cache",
    ".parcel-cache",
)

DEFAULTS_SOURCE = "built-in defaults"
NO_IGNORE_SOURCE = "none"

_FILE_HEADER = (
    "# dirtree ignore file\n"
    "# One pattern per line. '*' matches any run of characters, '?' matches one character.\n"
    "# Lines starting with '#' are comments.\n"
)


@dataclass(frozen=True)
class IgnoreSource:
    """The rule list handed to the tree walker, and where it came from.

    Attributes:
        rules: Trimmed, non-comment rule strings.
        source: Identifier shown in the report header, either the ignore file path,
            ``"built-in defaults"`` or ``"none"``.
    """

    rules: Tuple[str, ...]
    source: str


def parse_custom_patterns(text: str) -> List[str]:
    """Split a comma-separated answer into rules.

    Example:
        >>> parse_custom_patterns(" node_modules, *.log ,, dist")
        ['node_modules', '*.log', 'dist']
    """
    return [part.strip() for part in text.split(",") if part.strip()]


def read_ignore_file(path: PathType) -> List[str]:
    """Read the rules from an ignore file.

    Raises:
        IgnoreConfigError: If the file cannot be read or decoded.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreConfigError(f"Cannot read ignore file ({e})", path=str(path)) from e
    return parse_ignore_lines(content.splitlines())


def write_ignore_file(path: PathType, rules: Sequence[str]) -> None:
    """Write rules to an ignore file, one per line, below a comment header.

    Raises:
        IgnoreConfigError: If the file cannot be written.
    """
    content = _FILE_HEADER + "".join(f"{rule}\n" for rule in rules)
    try:
        Path(path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise IgnoreConfigError(f"Cannot create ignore file ({e})", path=str(path)) from e


class IgnoreFilePrompter:
    """Ask the user how to create a missing ignore file.

    Attributes:
        input_func: Callable used to read an answer, ``input`` by default.
        output: Stream the explanatory messages are written to.
    """

    def __init__(self, input_func: Callable[[str], str] = input, output: Optional[TextIO] = None) -> None:
        self.input_func = input_func
        self.output = output if output is not None else sys.stdout

    def _ask(self, question: str) -> str:
        try:
            return self.input_func(question)
        except EOFError as e:
            raise IgnoreConfigError("No answer provided while creating the ignore file") from e

    def confirm(self, question: str, default: bool = True) -> bool:
        """Ask a yes/no question. An empty answer selects ``default``."""
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._ask(f"{question} {hint} ").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            print("Please answer 'y' or 'n'.", file=self.output)

    def ask_rules(self, ignore_file: PathType) -> List[str]:
        """Run the first-run dialogue and return the chosen rules."""
        print(f"No ignore file found at {ignore_file}.", file=self.output)
        if self.confirm("Create it with the default ignore patterns?"):
            return list(DEFAULT_IGNORES)
        answer = self._ask("Enter patterns to ignore (comma-separated): ")
        return parse_custom_patterns(answer)


def load_ignore_source(
    ignore_file: PathType = IGNORE_FILE_NAME,
    *,
    no_ignore: bool = False,
    assume_defaults: bool = False,
    interactive: bool = True,
    prompter: Optional[IgnoreFilePrompter] = None,
) -> IgnoreSource:
    """Produce the rule list for a run.

    Args:
        ignore_file: Location of the ignore file.
        no_ignore: Skip the ignore file and use no rules at all.
        assume_defaults: Create a missing ignore file with the defaults without asking.
        interactive: Whether the user can be prompted. When False and the ignore
            file is missing, the defaults are used in memory and nothing is written.
        prompter: Prompter for the first-run dialogue.

    Returns:
        The rules and the identifier of their source.

    Raises:
        IgnoreConfigError: If the ignore file cannot be read or created, or the
            prompt receives no answer.

    Example:
        >>> load_ignore_source(no_ignore=True)
        IgnoreSource(rules=(), source='none')
    """
    if no_ignore:
        return IgnoreSource(rules=(), source=NO_IGNORE_SOURCE)

    path = Path(ignore_file)
    if path.is_file():
        return IgnoreSource(rules=tuple(read_ignore_file(path)), source=str(path))
    if path.exists():
        raise IgnoreConfigError("Ignore file is not a regular file", path=str(path))

    if assume_defaults:
        rules = list(DEFAULT_IGNORES)
    elif interactive:
        rules = (prompter or IgnoreFilePrompter()).ask_rules(path)
    else:
        return IgnoreSource(rules=DEFAULT_IGNORES, source=DEFAULTS_SOURCE)

    write_ignore_file(path, rules)
    return IgnoreSource(rules=tuple(read_ignore_file(path)), source=str(path))
