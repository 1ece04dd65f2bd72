from __future__ import annotations
from dataclasses import dataclass, asdict, replace
import json, pathlib

from .logging_utils import log

__all__ = ["DialSettings"]
_CFG = pathlib.Path.home() / ".yeardial.json"


@dataclass(frozen=True)
class DialSettings:
    min:   int = 2000          # inclusive
    max:   int = 2024          # inclusive
    value: int = 2015          # initial value, clamped into [min, max]
    label: str = "Release year"

    def __post_init__(self):
        for name in ("min", "max", "value"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise TypeError(f"{name} must be int, got {type(v).__name__}")
        if self.min >= self.max:
            raise ValueError(f"min ({self.min}) must be < max ({self.max})")
        if not self.min <= self.value <= self.max:
            clamped = max(self.min, min(self.max, self.value))
            log(f"⚠️  value {self.value} outside [{self.min}, {self.max}] → {clamped}")
            object.__setattr__(self, "value", clamped)

    def with_overrides(self, **kw) -> "DialSettings":
        """Copy with the non-None keyword overrides applied (re-validated)."""
        kw = {k: v for k, v in kw.items() if v is not None}
        return replace(self, **kw) if kw else self

    @classmethod
    def load(cls, path: pathlib.Path | None = None) -> "DialSettings":
        p = path or _CFG
        if p.exists():
            try:
                return cls(**json.loads(p.read_text()))
            except (OSError, ValueError, TypeError) as e:
                log(f"Ignoring {p}: {e}")
        return cls()

    def save(self, path: pathlib.Path | None = None) -> None:
        p = path or _CFG
        p.write_text(json.dumps(asdict(self), indent=2))
        log(f"[CFG] Saved → {p.resolve()}")
