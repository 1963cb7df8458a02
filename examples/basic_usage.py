#!/usr/bin/env python3
"""Basic usage example"""

import sys

import micrologging
from micrologging import LogLevel, RegistryBuilder
from micrologging.writers import FileWriter


def main():
    # Root functions write to standard output through the default registry
    micrologging.set_level(LogLevel.DEBUG)
    micrologging.add_output(sys.stderr)
    micrologging.add_output(FileWriter("logs/example.log"))

    micrologging.trace("This is trace")
    micrologging.debug("This is debug")
    micrologging.info("Application started, 100% ready")

    # Named loggers add a "(name)" segment to every line
    net = micrologging.get_logger("net")
    net.info("connect to %s", "host1")
    net.warn("retrying %s (attempt %d)", "host1", 2)

    # A separate registry built with the builder
    registry = (RegistryBuilder()
        .with_level("warning")
        .with_console(colored=True)
        .build())
    db = micrologging.get_logger("db", registry=registry)
    db.info("not shown")
    db.error("query failed: %(reason)s", {"reason": "timeout"})
    db.fatal("giving up")

    micrologging.get_registry().flush()


if __name__ == "__main__":
    main()
