"""
Graph export in Trivial Graph Format (TGF).
"""

from castgraph.serialization.tgf import (
    check_vertex_values,
    write_tgf,
    dumps_tgf,
    save_tgf,
    parse_tgf,
    read_tgf_vertices,
    load_tgf,
)

__all__ = [
    "check_vertex_values",
    "write_tgf",
    "dumps_tgf",
    "save_tgf",
    "parse_tgf",
    "read_tgf_vertices",
    "load_tgf",
]
