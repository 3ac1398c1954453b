"""
sheetlens configuration — every profiling knob in one place.

The defaults reproduce the behaviour of the spreadsheet profiler exactly.
Override via ``ProfilerConfig(date_ratio_threshold=0.9, ...)`` or from the
environment with :meth:`ProfilerConfig.from_env`.

Knob mapping
------------
- date_ratio_threshold / date_separators → type inference (Date branch)
- outlier_iqr_multiplier / q1_fraction / q3_fraction → IQR outlier bounds
- max_modes → mode truncation
- insight_sample_size → sample values handed to the insight service
- csv_separator / csv_encoding → delimited-text import and export
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ProfilerConfig:
    """Immutable configuration for all profiling subsystems."""

    # ── Type inference ───────────────────────────────────────────────
    date_ratio_threshold: float = 0.8
    """A column is a Date column when *more than* this fraction of its
    non-missing values look like dates."""

    date_separators: tuple[str, ...] = ("-", "/")
    """A text value only counts as a date if it parses *and* contains one
    of these characters.  Guards against bare numbers parsing as years."""

    # ── Numeric statistics ───────────────────────────────────────────
    outlier_iqr_multiplier: float = 1.5
    """Tukey fence multiplier: values outside
    ``[q1 - k·IQR, q3 + k·IQR]`` are potential outliers."""

    q1_fraction: float = 0.25
    q3_fraction: float = 0.75
    """Nearest-rank positions of the first and third quartile."""

    max_modes: int = 3
    """Multimodal columns report at most this many modes."""

    # ── Insight context ──────────────────────────────────────────────
    insight_sample_size: int = 10
    """Raw values sent alongside column stats to the insight service."""

    # ── Delimited text I/O ───────────────────────────────────────────
    csv_separator: str = ","
    csv_encoding: str = "utf8"

    @classmethod
    def from_env(cls, prefix: str = "SHEETLENS_") -> ProfilerConfig:
        """Build a config from ``<prefix><FIELD_NAME>`` environment variables.

        Unset variables keep their defaults.  ``date_separators`` is read as
        a comma-free string of single characters (``"-/"``).
        """
        overrides: dict[str, object] = {}
        for f in fields(cls):
            env_name = f"{prefix}{f.name.upper()}"
            raw = os.getenv(env_name)
            if raw is None or raw == "":
                continue
            default = getattr(cls, f.name)
            try:
                if isinstance(default, tuple):
                    overrides[f.name] = tuple(raw)
                elif isinstance(default, int):
                    overrides[f.name] = int(raw)
                elif isinstance(default, float):
                    overrides[f.name] = float(raw)
                else:
                    overrides[f.name] = raw
            except ValueError as exc:
                raise ValueError(f"Invalid value for {env_name}: {raw!r}") from exc
        return cls(**overrides)


# Alias for code using the lowercase name
profilerConfig = ProfilerConfig
