"""Admin domain schemas."""

from motortech.core.schemas import CamelModel, Envelope


class PlatformStats(CamelModel):
    total_users: int
    total_cars: int
    total_inspections: int
    pending_cars: int
    pending_inspections: int


class StatsEnvelope(Envelope):
    stats: PlatformStats
