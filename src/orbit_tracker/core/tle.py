"""
Two-Line Element (TLE) sets.

The element set is stored verbatim and handed to the propagator untouched.
Parsing here keeps only the catalog number; the remaining fixed-column
fields are read to reject payloads that are not a TLE at all.

TLE Format:
Line 0 (optional): Satellite name
Line 1: Catalog number, epoch, ballistic coefficient, etc.
Line 2: Inclination, RAAN, eccentricity, argument of perigee, mean anomaly, mean motion
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union


@dataclass(frozen=True)
class ElementSet:
    """Immutable two-line element set."""
    line1: str
    line2: str

    # Derived from line 1
    catalog_number: int = field(default=0, compare=False)


def parse_tle(line1: str, line2: str) -> ElementSet:
    """
    Parse and sanity-check a two-line element set.

    Raises:
        ValueError: if either line is not a TLE line or the fixed-column
            fields cannot be read.
    """
    line1 = line1.strip()
    line2 = line2.strip()

    if not line1.startswith('1 '):
        raise ValueError("Line 1 must start with '1 '")
    if not line2.startswith('2 '):
        raise ValueError("Line 2 must start with '2 '")

    try:
        catalog_number = int(line1[2:7].strip())

        # Epoch year and day
        int(line1[18:20])
        float(line1[20:32].strip())
    except (ValueError, IndexError) as e:
        raise ValueError(f"Error parsing TLE line 1: {e}") from e

    try:
        catalog_check = int(line2[2:7].strip())
        # Inclination, eccentricity (no leading decimal point), mean motion
        float(line2[8:16].strip())
        float("0." + line2[26:33].strip())
        float(line2[52:63].strip())
    except (ValueError, IndexError) as e:
        raise ValueError(f"Error parsing TLE line 2: {e}") from e

    if catalog_check != catalog_number:
        raise ValueError("Catalog number mismatch between lines")

    return ElementSet(
        line1=line1,
        line2=line2,
        catalog_number=catalog_number,
    )


def parse_tle_lines(lines: List[str]) -> List[Tuple[str, ElementSet]]:
    """
    Parse a block of 2-line or 3-line TLEs into (name, element set) pairs.
    Unnamed sets get an empty name.
    """
    lines = [line.rstrip('\n') for line in lines]
    out: List[Tuple[str, ElementSet]] = []
    i = 0

    while i < len(lines):
        if not lines[i].strip():
            i += 1
            continue

        if i + 2 < len(lines) and lines[i + 1].startswith('1 ') and lines[i + 2].startswith('2 '):
            out.append((lines[i].strip(), parse_tle(lines[i + 1], lines[i + 2])))
            i += 3
        elif i + 1 < len(lines) and lines[i].startswith('1 ') and lines[i + 1].startswith('2 '):
            out.append(("", parse_tle(lines[i], lines[i + 1])))
            i += 2
        else:
            i += 1

    return out


def load_tle_file(filepath: Union[str, Path]) -> List[Tuple[str, ElementSet]]:
    """Load every TLE in a file (2-line or 3-line format)."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return parse_tle_lines(f.readlines())


# Example TLEs for testing
EXAMPLE_ISS_TLE = """ISS (ZARYA)
1 25544U 98067A   21275.51020370  .00003026  00000-0  63146-4 0  9993
2 25544  51.6454 297.5612 0003681  73.8901  43.4185 15.48957534303374"""

EXAMPLE_STARLINK_TLE = """STARLINK-1007
1 44713U 19074A   21275.50886752  .00001156  00000-0  93328-4 0  9998
2 44713  53.0534 123.4578 0001387  87.6543 272.4623 15.06380957106897"""
