from dataclasses import dataclass, field
from datetime import date


# fmt: off
@dataclass(frozen=True)
class ShortURLRecord:
    id: int              # Unique among records held by the owning registry
    original_url: str    # URL exactly as submitted
    shortcode: str       # Fixed-length base36 code standing in for original_url
    created_at: date     # Calendar date the record was created
    clicks: int = 0      # Simulated usage events, never negative


@dataclass(frozen=True)
class RegistryStats:
    total_urls: int                 # Number of records currently held
    total_clicks: int               # Sum of clicks over held records
    capacity: int                   # Maximum number of records
    remaining: int                  # Free slots left before capacity is reached
    records: tuple[ShortURLRecord, ...] = field(default_factory=tuple)  # Snapshot, insertion order


@dataclass(frozen=True)
class SubmitResult:
    record: ShortURLRecord | None = None  # Created record on success
    error_code: str | None = None         # RegistryError.error_code on rejection
    message: str | None = None            # Human readable rejection reason

    @property
    def ok(self) -> bool:
        return self.error_code is None
# fmt: on
