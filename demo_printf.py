#!/usr/bin/env python3
"""
Demo: the printf variants side by side.

Formats the same sentence with typed markers and with bare markers,
then the container-driven variant.
"""

from vprintf import cstyle_printf, pack_printf, sequence_printf


def main():
    cstyle_printf(
        "The %s programming language is from year %d. \n"
        "Current version C++%d. GCC support since version %f.\n",
        "C++", 1985, 20, 10.1,
    )
    pack_printf(
        "The %s programming language is from year %. \n"
        "Current version C++%. GCC support since version %.\n",
        "C++", 1985, 20, 10.1,
    )
    pack_printf("The % language is from %.\n", "C++", 1985)
    sequence_printf("% mice, % cat\n", [3, 1])


if __name__ == "__main__":
    main()
