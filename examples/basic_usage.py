"""Example of configuring logtree from XML and logging through it.

Run with:
    python examples/basic_usage.py

Debug records are batched into rotating files under ./var/log, info records
go to stdout and to the same directory, warnings and errors go to stderr.
Trace and critical have no section and are discarded.
"""

import logging
from pathlib import Path

import logtree

CONFIG = Path(__file__).with_name("logs.xml")


def main() -> None:
    logtree.init_from_xml_file(CONFIG)

    logtree.info("service starting")
    for i in range(5):
        logtree.debugf("processing item %d", i)
    logtree.warn("cache is cold")
    logtree.errorf("upstream returned %d", 503)
    logtree.trace("not configured, discarded")

    # Records from the standard logging module can be routed as well
    handler = logtree.WriterHandler(logtree.get_router())
    std_logger = logging.getLogger("example")
    std_logger.addHandler(handler)
    std_logger.setLevel(logging.DEBUG)
    std_logger.info("hello from logging")

    logtree.flush()


if __name__ == "__main__":
    main()
