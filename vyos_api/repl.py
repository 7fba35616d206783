"""Interactive shell for a VyOS device.

Reads URL and KEY from the environment (or a .env file) and accepts
commands like ``config show system host-name`` at the ``v>`` prompt.
"""

import asyncio
import json
import logging
import os
import shlex
import sys
from pathlib import Path
from typing import Any, Callable, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .client import Vyos
from .config import ClientConfig, ConfigError, LoggingConfig, config_from_env, load_config
from .errors import VyosError

logger = logging.getLogger(__name__)

PROMPT = "v> "

HELP = """\
config show|get <path...>        show configuration at path
config set <path...> <value>     set path to value and commit
config delete <path...>          delete path and commit
config comment <path...> <text>  set comment ("" removes it)
config save [file]               save config (default /config/config.boot)
config load [file]               load config (default /config/config.boot)
images add <url>                 install an OS image
images remove <name>             remove an OS image
ops show <path...>               run an operational show command
ops generate <path...>           run an operational generate command
help                             show this text
exit | quit                      leave the shell
Quote arguments containing spaces, e.g. config comment system "my box"."""

_EXIT_WORDS = {"exit", "quit"}

CONFIG_PATH_ENV = "VYOS_CONFIG"
DEFAULT_CONFIG_PATH = "config.yaml"


class UsageError(ValueError):
    """A shell command was malformed."""


def format_result(result: Any) -> str:
    if result is None:
        return "ok"
    if isinstance(result, str):
        return result.rstrip("\n")
    return json.dumps(result, indent=2, sort_keys=True)


def _path(args: list[str], usage: str) -> str:
    if not args:
        raise UsageError(f"usage: {usage}")
    return " ".join(args)


def _path_and_value(args: list[str], usage: str) -> tuple[str, str]:
    if len(args) < 2:
        raise UsageError(f"usage: {usage}")
    return " ".join(args[:-1]), args[-1]


def _single(args: list[str], usage: str) -> str:
    if len(args) != 1:
        raise UsageError(f"usage: {usage}")
    return args[0]


def _optional(args: list[str], usage: str) -> Optional[str]:
    if len(args) > 1:
        raise UsageError(f"usage: {usage}")
    return args[0] if args else None


async def dispatch(vyos: Vyos, line: str) -> str:
    """Run one shell command against ``vyos`` and return the text to print.

    Raises UsageError for malformed commands; VyosError propagates.
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        raise UsageError(str(e)) from e
    if not tokens:
        return ""

    group, *rest = tokens
    if group == "help":
        return HELP
    if not rest:
        raise UsageError(f"missing operation for '{group}', try 'help'")
    op, args = rest[0], rest[1:]

    if group == "config":
        cfg = vyos.config
        if op in ("show", "get"):
            return format_result(await cfg.show(_path(args, "config show <path...>")))
        if op == "set":
            path, value = _path_and_value(args, "config set <path...> <value>")
            return format_result(await cfg.set(path, value))
        if op == "delete":
            return format_result(await cfg.delete(_path(args, "config delete <path...>")))
        if op == "comment":
            path, value = _path_and_value(args, "config comment <path...> <text>")
            return format_result(await cfg.comment(path, value))
        if op == "save":
            return format_result(await cfg.save(_optional(args, "config save [file]")))
        if op == "load":
            return format_result(await cfg.load(_optional(args, "config load [file]")))
    elif group == "images":
        if op == "add":
            return format_result(await vyos.images.add(_single(args, "images add <url>")))
        if op == "remove":
            return format_result(await vyos.images.remove(_single(args, "images remove <name>")))
    elif group == "ops":
        if op == "show":
            return format_result(await vyos.ops.show(_path(args, "ops show <path...>")))
        if op == "generate":
            return format_result(await vyos.ops.generate(_path(args, "ops generate <path...>")))
    else:
        raise UsageError(f"unknown command '{group}', try 'help'")

    raise UsageError(f"unknown operation '{group} {op}', try 'help'")


async def run_repl(vyos: Vyos, reader: Callable[[str], str] = input) -> None:
    """Prompt for commands until exit/quit or EOF."""
    while True:
        try:
            line = await asyncio.to_thread(reader, PROMPT)
        except EOFError:
            print()
            return
        if line.strip() in _EXIT_WORDS:
            return
        try:
            output = await dispatch(vyos, line)
        except UsageError as e:
            print(e)
            continue
        except VyosError as e:
            print(f"error: {e}")
            continue
        if output:
            print(output)


def load_settings() -> tuple[ClientConfig, LoggingConfig]:
    """Read $VYOS_CONFIG or ./config.yaml when present, else URL/KEY/LOG_LEVEL."""
    path = os.environ.get(CONFIG_PATH_ENV)
    if path or Path(DEFAULT_CONFIG_PATH).exists():
        cfg = load_config(path or DEFAULT_CONFIG_PATH)
        logger.debug("Loaded config from %s", path or DEFAULT_CONFIG_PATH)
        return cfg.client, cfg.logging
    log_config = LoggingConfig(level=os.environ.get("LOG_LEVEL", "WARNING"))
    return config_from_env(), log_config


def main() -> None:
    load_dotenv()

    try:
        client_config, log_config = load_settings()
    except (ConfigError, ValidationError, FileNotFoundError) as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, log_config.level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    vyos = Vyos.from_config(client_config)
    logger.info("Shell targeting %s", vyos.base_url)
    try:
        asyncio.run(run_repl(vyos))
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
