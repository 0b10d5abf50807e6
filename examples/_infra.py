from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class ConfigError(Exception):
    pass


@dataclass(frozen=True, slots=True)
class Settings:
    host: str
    port: int


def _empty_env() -> dict[str, str]:
    return {}


@dataclass(slots=True)
class FakeEnv:
    values: dict[str, str] = field(default_factory=_empty_env)
    reads: int = 0

    def read(self, key: str) -> str:
        """Returns the value or RAISES ConfigError. Does NOT return Try."""
        self.reads += 1
        try:
            return self.values[key]
        except KeyError:
            raise ConfigError(f"missing {key}") from None


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
