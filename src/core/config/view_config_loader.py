"""
View configuration management.

Loads filter/sort selections from YAML files and provides a builder for
assembling them in code.
"""

from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any

import yaml

from src.core.models import CustomRange, ViewConfig


def parse_range_bound(value: Any, *, end_of_day: bool = False) -> datetime:
    """
    Turn a range bound from YAML or the command line into an aware datetime.

    Bare dates expand to the start of the day, or to its last microsecond
    when ``end_of_day`` is set, so a one-day range covers the whole day.
    Naive values are taken to be UTC.

    Raises:
        ValueError: If the value is not a date, datetime or ISO 8601 string
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                value = date.fromisoformat(text)
            else:
                value = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            raise ValueError(f"Invalid date or datetime: {value!r}")

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.max if end_of_day else time.min)
    else:
        raise ValueError(f"Invalid date or datetime: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ViewConfigLoader:
    """
    Loads a ViewConfig from a YAML configuration file.

    Expected YAML format:
    ```yaml
    view:
      amount_threshold: ">100"
      date_mode: custom-range
      custom_range:
        start: 2026-10-01
        end: 2026-10-19
      sort_order: descending
    ```
    Keys may also use the camelCase names of the JSON output.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the view config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"View configuration file not found: {config_path}")

    def load(self) -> ViewConfig:
        """
        Load and parse the view configuration.

        Returns:
            ViewConfig built from the 'view' section

        Raises:
            ValueError: If the file has no 'view' section or a bad range bound
            pydantic.ValidationError: If an option is outside its allowed set
        """
        with open(self.config_path) as f:
            config = yaml.safe_load(f)

        if not config or "view" not in config:
            raise ValueError("Configuration file must contain 'view' section")

        section = dict(config["view"] or {})
        range_key = "customRange" if "customRange" in section else "custom_range"
        if section.get(range_key):
            section[range_key] = self._parse_range(section[range_key])

        return ViewConfig.model_validate(section)

    @staticmethod
    def _parse_range(raw_range: dict[str, Any]) -> CustomRange:
        if "start" not in raw_range or "end" not in raw_range:
            raise ValueError("custom_range needs both 'start' and 'end'")
        return CustomRange(
            start=parse_range_bound(raw_range["start"]),
            end=parse_range_bound(raw_range["end"], end_of_day=True),
        )


class ViewConfigBuilder:
    """
    Programmatically build view configurations (for tests or the CLI).
    """

    def __init__(self):
        self.options: dict[str, Any] = {}

    def amount_over(self, threshold: str) -> "ViewConfigBuilder":
        """Set the amount threshold option ("none", ">100", ">500", ">1000")."""
        self.options["amount_threshold"] = threshold
        return self

    def last(self, window: str) -> "ViewConfigBuilder":
        """Set a relative date window ("24h", "7d", "30d")."""
        self.options["date_mode"] = f"last-{window}"
        self.options.pop("custom_range", None)
        return self

    def between(self, start: Any, end: Any) -> "ViewConfigBuilder":
        """Switch to custom-range mode with inclusive bounds."""
        self.options["date_mode"] = "custom-range"
        self.options["custom_range"] = CustomRange(
            start=parse_range_bound(start),
            end=parse_range_bound(end, end_of_day=True),
        )
        return self

    def sorted_by_total(self, order: str) -> "ViewConfigBuilder":
        """Set the sort order ("none", "ascending", "descending")."""
        self.options["sort_order"] = order
        return self

    def build(self) -> ViewConfig:
        return ViewConfig(**self.options)
