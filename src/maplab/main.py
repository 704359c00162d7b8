from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Tuple

from .config import Config, default_config, load_config, with_overrides
from .console import progress_bar, show_map
from .session import NoOriginalError, Session

logger = logging.getLogger(__name__)

HEADER = "=== PATTERN LAB: BUILDER + PROTOTYPE ==="


Action = Tuple[str, Optional[str]]


def _menu_entries(session: Session) -> List[Tuple[str, str, Action]]:
    entries = []
    for number, (key, variant) in enumerate(session.variants.items(), start=1):
        entries.append((str(number), f"BUILD: {variant.label} Map", ("build", key)))
    next_number = len(entries) + 1
    entries.append((str(next_number), "CLONE: Make a copy of current map", ("clone", None)))
    entries.append((str(next_number + 1), "MODIFY: Change original", ("modify", None)))
    return entries


def _print_state(session: Session, config: Config, out: TextIO, color: bool) -> None:
    out.write(f"{HEADER}\n")
    if session.original is not None:
        out.write("\n[Current Original]:\n")
        show_map(session.original, out, color)
    else:
        out.write("\n[No Map Created yet]\n")

    if session.clones:
        out.write(f"\n[Clones Created: {len(session.clones)}]\n")
        for number, clone in session.recent_clones(config.display.clone_preview):
            show_map(clone, out, color, prefix=f"#{number} ")


def run_menu(
    session: Session,
    config: Config,
    stdin: TextIO,
    stdout: TextIO,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    color = config.display.color
    entries = _menu_entries(session)
    actions = {choice: action for choice, _, action in entries}

    while True:
        _print_state(session, config, stdout, color)
        stdout.write("\n---------------- MENU ----------------\n")
        for choice, label, _ in entries:
            stdout.write(f"{choice}. {label}\n")
        stdout.write("0. Exit\n")
        stdout.write("Select: ")
        stdout.flush()

        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        choice = line.strip()
        if choice == "0":
            break

        action = actions.get(choice)
        if action is None:
            stdout.write(f"Unknown option: {choice}\n")
        elif action[0] == "clone":
            try:
                session.clone()
            except NoOriginalError:
                stdout.write("Error: Nothing to clone!\n")
            else:
                stdout.write("Clone created instantly!\n")
        elif action[0] == "modify":
            try:
                session.modify_original()
            except NoOriginalError:
                stdout.write("Error: Nothing to modify!\n")
            else:
                stdout.write("Original map modified!\n")
        else:
            key = action[1]
            variant = session.variants[key]
            stdout.write(f"\nBuilding {variant.label}...\n")
            progress_bar(stdout, config.progress.steps, config.progress.delay, sleep=sleep)
            session.build(key)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build, clone and modify tile maps interactively.")
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to a TOML config file (built-in defaults when omitted).")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI theme colours.")
    parser.add_argument("--delay", type=float, default=None,
                        help="Seconds per progress bar step (overrides the config).")
    parser.add_argument("--verbose", action="store_true",
                        help="Log construction and clone events to stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config) if args.config is not None else default_config()
        config = with_overrides(config, color=False if args.no_color else None, delay=args.delay)
    except (FileNotFoundError, ValueError) as exc:
        print(f"maplab: {exc}", file=sys.stderr)
        return 2
    logger.debug("Loaded %d map variants", len(config.variants))

    session = Session(config.variants)
    return run_menu(session, config, sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())
