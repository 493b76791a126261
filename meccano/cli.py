"""Command line entry point running the frame searches."""

from __future__ import annotations

import argparse

from . import hepta, hexa

_SEARCHES = {
    "hexa-diagonals": hexa.diagonals,
    "hexa-triangles": hexa.triangles_120_tex,
    "hexa-inside": hexa.triangle_inside_hexagon,
    "hepta-diagonals": hepta.diagonals,
}


def main(argv=None) -> int:
    """Run one search and print its results."""
    parser = argparse.ArgumentParser(
        prog="meccano", description="Search integer meccano frames."
    )
    parser.add_argument(
        "search", nargs="?", default="hexa-diagonals", choices=sorted(_SEARCHES)
    )
    parser.add_argument("--max", dest="max_size", type=int, default=200)
    args = parser.parse_args(argv)
    _SEARCHES[args.search](args.max_size)
    return 0