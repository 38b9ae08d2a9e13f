"""Action Entry Point — runs one operation from workflow inputs and writes workflow outputs.

Invariants:
    - Inputs read from INPUT_<NAME> environment variables (runner convention)
    - Outputs appended to the file named by GITHUB_OUTPUT, stdout when unset
    - The create admin key is registered with ::add-mask:: before it is written anywhere
    - Any CounterOpsError becomes an ::error:: command and exit status 1

Design Decisions:
    - env and stdout injectable: tests run the whole entry point without a runner
    - Multi-line values use the heredoc delimiter form so a value can never forge a second output
    - Command data and properties escaped like the runner toolkit (%, CR, LF; also : and , in
      properties): a remote or user-supplied message can never start a command of its own
"""

import asyncio
import logging
import os
import sys
import uuid
from collections.abc import Mapping
from typing import TextIO

import httpx

from counterops.config import get_settings
from counterops.core.domain_types import Operation
from counterops.core.errors import CounterOpsError
from counterops.infrastructure.counter_client import build_counter_client
from counterops.infrastructure.observability import setup_logging
from counterops.services.operation_dispatch import OperationDispatcher

logger = logging.getLogger(__name__)

INPUT_NAMES = ("namespace", "key", "initializer", "value", "admin_key")


def read_input(env: Mapping[str, str], name: str) -> str:
    """INPUT_<NAME>, spaces as underscores; hyphenated spelling also accepted."""
    upper = name.upper().replace(" ", "_")
    for candidate in (f"INPUT_{upper}", f"INPUT_{upper.replace('_', '-')}"):
        if candidate in env:
            return env[candidate].strip()
    return ""


def format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def mask_commands(secret: str) -> str:
    """::add-mask:: for the whole secret and for each of its lines."""
    values = [secret] + [line for line in secret.splitlines() if line and line != secret]
    return "".join(f"::add-mask::{escape_data(value)}\n" for value in values)


def write_outputs(
    outputs: Mapping[str, str], env: Mapping[str, str], stdout: TextIO,
) -> None:
    text = "".join(format_output(name, value) for name, value in outputs.items())
    output_file = env.get("GITHUB_OUTPUT")
    if output_file:
        with open(output_file, "a", encoding="utf-8") as f:
            f.write(text)
    else:
        stdout.write(text)


async def run_action(
    env: Mapping[str, str],
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    stdout: TextIO = sys.stdout,
) -> int:
    """Run the operation described by `env`. Returns the process exit status."""
    operation = read_input(env, "operation")
    raw_inputs = {name: read_input(env, name) for name in INPUT_NAMES}

    async with build_counter_client(transport=transport) as client:
        dispatcher = OperationDispatcher(client)
        try:
            outputs = await dispatcher.execute(operation, raw_inputs)
        except CounterOpsError as e:
            stdout.write(
                f"::error title={escape_property(e.code)}::{escape_data(e.message)}\n",
            )
            return 1

    if operation == Operation.CREATE.value and outputs.get("admin_key"):
        stdout.write(mask_commands(outputs["admin_key"]))
    write_outputs(outputs, env, stdout)
    logger.info(f"Wrote {len(outputs)} output(s) for '{operation}'")
    return 0


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    sys.exit(asyncio.run(run_action(os.environ)))


if __name__ == "__main__":
    main()
