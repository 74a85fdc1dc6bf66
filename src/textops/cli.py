"""
textops Command-Line Interface.

Exposes the string helpers and prompts as shell commands.

Usage:
    textops split "a,b,,c" -d ,             # one fragment per line
    textops chunk "abcdef" -n 4
    textops pair "key=value" -d =
    textops replace "a-b-c" -s - -r + --all
    textops remove "a-b-c" -s - --all
    textops between "k=[v];" "[" "]"
    textops clip "aaa bbb ccc" bbb -w 7
    textops contains "xxabcxx" ABC -i       # exit status 0 when found
    textops case "Hello" upper
    textops repeat "ab" 3
    textops confirm "Continue?"             # exit status 0 for yes
    textops prompt "Name" --required

A TEXT argument of "-" reads the text from standard input.
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from textops import __version__, strings
from textops.config import PromptConfig
from textops.term import confirm, prompt, prompt_password
from textops.utils.errors import ContractViolation, TextOpsError

logger = logging.getLogger(__name__)


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    DIM = "\033[2m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        for attr in ["RED", "GREEN", "DIM", "RESET"]:
            setattr(cls, attr, "")


def _init_colors() -> None:
    """Initialize colors based on terminal capabilities."""
    if not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


_init_colors()


# =============================================================================
# Argument Parsing
# =============================================================================


def _add_text(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("text", help='Input text ("-" reads standard input)')


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="textops",
        description="textops - string manipulation and terminal prompt helpers",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    split_parser = subparsers.add_parser("split", help="Split text on a delimiter")
    _add_text(split_parser)
    split_parser.add_argument("-d", "--delimiter", required=True, help="Delimiter")
    split_parser.add_argument("--json", action="store_true", help="Print a JSON list")

    chunk_parser = subparsers.add_parser("chunk", help="Split text into fixed-size chunks")
    _add_text(chunk_parser)
    chunk_parser.add_argument("-n", "--size", type=int, required=True, help="Chunk length")
    chunk_parser.add_argument("--json", action="store_true", help="Print a JSON list")

    pair_parser = subparsers.add_parser("pair", help="Split text at the first delimiter")
    _add_text(pair_parser)
    pair_parser.add_argument("-d", "--delimiter", required=True, help="Delimiter")
    pair_parser.add_argument("--json", action="store_true", help="Print a JSON list")

    replace_parser = subparsers.add_parser(
        "replace",
        aliases=["r"],
        help="Replace substrings",
    )
    _add_text(replace_parser)
    replace_parser.add_argument(
        "-s",
        "--search",
        action="append",
        required=True,
        help="Search string (repeatable, paired with -r by position)",
    )
    replace_parser.add_argument(
        "-r",
        "--replace",
        action="append",
        required=True,
        help="Replacement string (repeatable)",
    )
    replace_parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Replace every occurrence instead of the first",
    )

    remove_parser = subparsers.add_parser("remove", help="Remove substrings")
    _add_text(remove_parser)
    remove_parser.add_argument(
        "-s",
        "--search",
        action="append",
        required=True,
        help="String to remove (repeatable)",
    )
    remove_parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Remove every occurrence instead of the first",
    )

    between_parser = subparsers.add_parser(
        "between", help="Extract the text between two markers"
    )
    _add_text(between_parser)
    between_parser.add_argument("begin", help="Opening marker")
    between_parser.add_argument("end", help="Closing marker")
    between_parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Shift the extracted slice right (positive) or left (negative)",
    )

    clip_parser = subparsers.add_parser("clip", help="Extract a window centred on a match")
    _add_text(clip_parser)
    clip_parser.add_argument("search", help="String to centre on")
    clip_parser.add_argument("-w", "--width", type=int, required=True, help="Window width")
    clip_parser.add_argument("-i", "--icase", action="store_true", help="Ignore case")

    contains_parser = subparsers.add_parser("contains", help="Test for a substring")
    _add_text(contains_parser)
    contains_parser.add_argument("needle", help="Substring to look for")
    contains_parser.add_argument("-i", "--icase", action="store_true", help="Ignore case")
    contains_parser.add_argument(
        "--folding",
        default=None,
        help="Case folding for -i (upper, casefold, ascii)",
    )

    case_parser = subparsers.add_parser("case", help="Convert case")
    _add_text(case_parser)
    case_parser.add_argument("mode", choices=["upper", "lower"], help="Target case")

    repeat_parser = subparsers.add_parser("repeat", help="Repeat text")
    _add_text(repeat_parser)
    repeat_parser.add_argument("count", type=int, help="Number of repetitions")

    confirm_parser = subparsers.add_parser("confirm", help="Ask a yes/no question")
    confirm_parser.add_argument("message", help="Question to ask")
    confirm_parser.add_argument(
        "-y",
        "--default-yes",
        action="store_true",
        help="Treat an empty answer as yes",
    )

    prompt_parser = subparsers.add_parser("prompt", help="Ask for a line of text")
    prompt_parser.add_argument("message", help="Prompt message")
    prompt_parser.add_argument(
        "--required", action="store_true", help="Ask again until an answer is given"
    )
    prompt_parser.add_argument("--default", default="", help="Answer used for empty input")
    prompt_parser.add_argument(
        "--password", action="store_true", help="Read without echoing the answer"
    )
    prompt_parser.add_argument("--mask", default=None, help="Character echoed per keystroke")

    return parser


# =============================================================================
# Command Handlers
# =============================================================================


def _read_text(value: str) -> str:
    if value != "-":
        return value
    text = strings.read_stream(sys.stdin)
    return text[:-1] if text.endswith("\n") else text


def _print_list(items: list[str], as_json: bool) -> None:
    if as_json:
        print(json.dumps(items))
    else:
        for item in items:
            print(item)


def cmd_split(args: argparse.Namespace) -> int:
    """Handle the split command."""
    _print_list(strings.split(_read_text(args.text), args.delimiter), args.json)
    return 0


def cmd_chunk(args: argparse.Namespace) -> int:
    """Handle the chunk command."""
    _print_list(strings.split_by_len(_read_text(args.text), args.size), args.json)
    return 0


def cmd_pair(args: argparse.Namespace) -> int:
    """Handle the pair command."""
    _print_list(list(strings.split_pair(_read_text(args.text), args.delimiter)), args.json)
    return 0


def cmd_replace(args: argparse.Namespace) -> int:
    """Handle the replace command."""
    text = _read_text(args.text)
    if args.all:
        result = strings.substr_replace_all_ret(args.search, args.replace, text)
    else:
        if len(args.search) != len(args.replace):
            raise ContractViolation(
                f"got {len(args.search)} search strings but {len(args.replace)} replacements",
                operation="replace",
            )
        result = text
        for search, replacement in zip(args.search, args.replace):
            result = strings.substr_replace_ret(search, replacement, result)
    print(result)
    return 0


def cmd_remove(args: argparse.Namespace) -> int:
    """Handle the remove command."""
    text = _read_text(args.text)
    if args.all:
        result = strings.substr_remove_all_ret(text, args.search)
    else:
        result = text
        for removable in args.search:
            result = strings.substr_remove_ret(result, removable)
    print(result)
    return 0


def cmd_between(args: argparse.Namespace) -> int:
    """Handle the between command."""
    print(strings.substr_inverse(_read_text(args.text), args.begin, args.end, args.offset))
    return 0


def cmd_clip(args: argparse.Namespace) -> int:
    """Handle the clip command."""
    print(strings.substr_clip(_read_text(args.text), args.search, args.width, args.icase))
    return 0


def cmd_contains(args: argparse.Namespace) -> int:
    """Handle the contains command. Exit status 0 when the needle is found."""
    text = _read_text(args.text)
    if args.icase:
        found = strings.has_substring_icase(args.needle, text, args.folding)
    else:
        found = strings.has_substring(args.needle, text)

    if found:
        print(f"{Colors.GREEN}true{Colors.RESET}")
        return 0
    print(f"{Colors.RED}false{Colors.RESET}")
    return 1


def cmd_case(args: argparse.Namespace) -> int:
    """Handle the case command."""
    text = _read_text(args.text)
    if args.mode == "upper":
        print(strings.to_upper_case(text))
    else:
        print(strings.to_lower_case(text))
    return 0


def cmd_repeat(args: argparse.Namespace) -> int:
    """Handle the repeat command."""
    print(strings.repeat(_read_text(args.text), args.count))
    return 0


def cmd_confirm(args: argparse.Namespace) -> int:
    """Handle the confirm command. Exit status 0 for yes, 1 for no."""
    config = PromptConfig.from_env()
    answer = confirm(args.message, args.default_yes, config=config)
    logger.info(f"Confirm answered {'yes' if answer else 'no'}")
    return 0 if answer else 1


def cmd_prompt(args: argparse.Namespace) -> int:
    """Handle the prompt command."""
    if args.password:
        config = PromptConfig.from_env()
        # prompt text goes to stderr so the answer can be captured from stdout
        answer = prompt_password(args.message, mask=args.mask, stdout=sys.stderr, config=config)
    else:
        answer = prompt(args.message, args.required, args.default, stdout=sys.stderr)
    print(answer)
    return 0


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    command_handlers = {
        "split": cmd_split,
        "chunk": cmd_chunk,
        "pair": cmd_pair,
        "replace": cmd_replace,
        "r": cmd_replace,
        "remove": cmd_remove,
        "between": cmd_between,
        "clip": cmd_clip,
        "contains": cmd_contains,
        "case": cmd_case,
        "repeat": cmd_repeat,
        "confirm": cmd_confirm,
        "prompt": cmd_prompt,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except TextOpsError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(f"\n{Colors.DIM}Interrupted{Colors.RESET}", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
