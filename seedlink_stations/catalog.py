# seedlink_stations/catalog.py
# GNU General Public License v3.0
# Copyright (C) 2025-2026 Kris Kirby, KE4AHR
#
# Seedlink CAT response parsing
# Fixed columns: network [0:2], station [3:8], site [9:]
# Short or malformed lines degrade to empty fields, never rejected

from typing import List
from pydantic import BaseModel

END_MARKER = b"\nEND"


class StationRecord(BaseModel):
    """One network/station/site triple from a catalog line."""
    network: str = ""
    station: str = ""
    site: str = ""

    def to_line(self) -> str:
        """Serialize back into the fixed-column catalog layout."""
        return f"{self.network:<2} {self.station:<5} {self.site}"


def parse_station_line(line: str) -> StationRecord:
    return StationRecord(
        network=line[0:2].strip(),
        station=line[3:8].strip(),
        site=line[9:].strip(),
    )


def parse_catalog(buffer: bytes) -> List[StationRecord]:
    """
    Parse a complete catalog buffer ending in "\\nEND".
    Everything before the last "\\nEND" is split on newlines; every line
    is parsed in order.
    """
    body = buffer[:buffer.rfind(END_MARKER)]
    text = body.decode("utf-8", errors="replace")
    return [parse_station_line(line) for line in text.split("\n")]
