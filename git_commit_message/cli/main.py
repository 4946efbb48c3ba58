"""CLI Main Entry Point"""

import sys
import time
from typing import Callable

from git_commit_message.config import Config, ConfigError, load_config
from git_commit_message.git import DiffCollector, DiffError
from git_commit_message.llm import InferenceError, OllamaClient
from git_commit_message.output import success, info, print_error, print_debug, CHECK, ROBOT, THINKING, Spinner

from git_commit_message.cli.args import parse_args
from git_commit_message.cli.commands import display_config, run_setup, run_install_completion
from git_commit_message.cli.utils import normalize


def _handle_subcommands(args):
    """Handle subcommands that exit early.

    Returns:
        tuple: (exit_code, should_exit) - exit_code if should_exit is True
    """
    if args.install_completion:
        return run_install_completion(), True
    if args.display_config:
        return display_config(), True
    if args.setup:
        return run_setup(), True
    return 0, False


def _infer_with_spinner(client, diff, timings):
    t0 = time.time()
    with Spinner():
        raw = client.infer(diff)
    timings['generate'] = time.time() - t0
    return raw


def _print_verbose_stats(client, diff, timings):
    print_debug(f"Endpoint: {client.url}")
    print_debug(f"Model: {client.name}, temperature {client.config.temperature}")
    print_debug(f"Diff: {len(diff)} chars, prompt ~{len(client.last_request.prompt) // 4} tokens")
    print_debug(", ".join(f"{step}={seconds:.2f}s" for step, seconds in timings.items()))


def generate_commit_message(
    load: Callable[[], Config] = load_config,
    collector: DiffCollector | None = None,
    client_factory: Callable[[Config], OllamaClient] = OllamaClient,
    verbose: bool = False,
) -> int:
    """Run config -> diff -> inference -> normalize, printing the message last.

    Every step stops the run on failure; later steps are never reached.

    Returns:
        int: Exit code
    """
    timings = {}

    try:
        config = load()
    except ConfigError as e:
        print_error(f"Error loading configuration: {e}")
        return 1

    collector = collector or DiffCollector()
    t0 = time.time()
    try:
        diff = collector.collect()
    except DiffError as e:
        print_error(f"Error getting git diff: {e}")
        return 1
    timings['git'] = time.time() - t0

    if not diff.strip():
        scope = "staged " if collector.staged else ""
        print(f"No {scope}changes found. Nothing to commit. {THINKING}".rstrip())
        return 0

    print(f"{ROBOT} Generating commit message from diff...", flush=True)
    client = client_factory(config)
    try:
        raw = _infer_with_spinner(client, diff, timings)
    except InferenceError as e:
        print_error(f"Error generating commit message: {e}")
        return 1

    if verbose:
        _print_verbose_stats(client, diff, timings)

    message = normalize(raw)
    print(f"\n{success(CHECK)} {info('Suggested Commit Message:')}")
    print(message)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    exit_code, should_exit = _handle_subcommands(args)
    if should_exit:
        return exit_code

    return generate_commit_message(
        collector=DiffCollector(staged=args.staged),
        verbose=args.verbose,
    )


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)
