"""Example of registering a custom writer type.

Run with:
    python examples/custom_writer.py

Registers a ``memory`` writer type, configures it behind a buffer and
inspects what reached it.
"""

import logtree
from logtree import MemoryWriter

captured = MemoryWriter()

logtree.register("memory", lambda attrs: captured)

logtree.init_from_xml_string(
    """
    <logs>
        <info flag="">
            <buffer size="3">
                <memory />
            </buffer>
        </info>
    </logs>
    """
)

for word in ("one", "two", "three", "four"):
    logtree.info(word)

print("after 4 records:", captured.payloads)
logtree.flush()
print("after flush:    ", captured.payloads)
