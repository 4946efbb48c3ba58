"""CLI Commands"""

import os
import sys

from git_commit_message.config import Config, ConfigError, load_config, save_config, get_config_path
from git_commit_message.output import bold, dim, info, warning, print_success, print_error, print_warning

from git_commit_message.cli.args import PROG

DEFAULT_OLLAMA_URL = "http://localhost:11434"
RECOMMENDED_MODELS = "llama3.2:3b, gemma3:4b, mistral:7b"


def display_config() -> int:
    """Display current configuration."""
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")
    print(f"  {dim('Config file:')} {config_path}")

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print()
        print_error(str(e))
        print(f"\n  {dim('Run')} {PROG} --setup {dim('to create it')}\n")
        return 1

    print()
    print(f"  {bold('Settings:')}")
    print(f"    ollama_url:  {info(config.ollama_url or '(empty)')}")
    print(f"    model:       {info(config.model or '(empty)')}")
    print(f"    temperature: {info(str(config.temperature))}")

    if not config.endpoint_is_valid():
        print()
        print_warning(f"ollama_url {config.ollama_url!r} is not an http(s) URL")

    print(f"\n  {dim('Run')} {PROG} --setup {dim('to configure')}\n")
    return 0


def _ask(label: str, default: str) -> str:
    suffix = f" [{default}]" if default else ""
    return input(f"{label}{suffix}: ").strip() or default


def run_setup() -> int:
    """Quick setup wizard. Existing values are offered as defaults."""
    path = get_config_path()
    try:
        current = load_config(path)
    except ConfigError:
        current = Config(ollama_url=DEFAULT_OLLAMA_URL)

    print(f"\n{bold('Setup Wizard')}\n")
    print(f"  {dim('Writing:')} {path}\n")

    try:
        ollama_url = _ask("Ollama URL", current.ollama_url or DEFAULT_OLLAMA_URL)

        print(f"\nRecommended: {RECOMMENDED_MODELS}\n")
        model = ""
        while not model:
            model = _ask("Model", current.model)

        temperature = None
        while temperature is None:
            raw = _ask("\nTemperature (0.0 - 1.0)", str(current.temperature))
            try:
                temperature = float(raw)
            except ValueError:
                print(warning(f"  '{raw}' is not a number"))
    except (KeyboardInterrupt, EOFError):
        print(f"\n{dim('Cancelled.')}")
        return 1

    config = Config(ollama_url=ollama_url, model=model, temperature=temperature)
    try:
        saved = save_config(config, path)
    except OSError as e:
        print_error(f"Could not write {path}: {e}")
        return 1

    print_success(f"Saved to {saved}")
    if not config.endpoint_is_valid():
        print_warning(f"ollama_url {ollama_url!r} is not an http(s) URL")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = f'eval "$(register-python-argcomplete {PROG})"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print(f"  register-python-argcomplete --shell powershell {PROG} | Out-String | Invoke-Expression\n")
        print("To make it permanent, add that line to your $PROFILE")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print(f"  register-python-argcomplete --shell fish {PROG} | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
