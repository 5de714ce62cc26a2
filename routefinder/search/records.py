"Defines the location record stored by the prefix search index"

from typing import NamedTuple


class LocationRecord(NamedTuple):
    "Snapshot of a named location at the time it was indexed"
    vertex_id: int
    lon: float
    lat: float
    name: str

    def to_dict(self) -> dict:
        "Returns the record in the shape served to clients"
        return {"id": self.vertex_id, "lon": self.lon, "lat": self.lat, "name": self.name}
