from __future__ import annotations

from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class SelectorkitConfig:
    log_level: str = "WARNING"
    log_format: str = LOG_FORMAT
