from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping, Optional, Union


ENV_PREFIX = "MDREFLOW_"


class WrapLongLinks(str, Enum):
    """What to do with a link word wider than the available line width."""

    ISOLATE = "isolate"
    OVERFLOW = "overflow"
    BREAK_BEFORE = "break-before"

    @classmethod
    def parse(cls, value: Union[str, "WrapLongLinks"]) -> "WrapLongLinks":
        if isinstance(value, WrapLongLinks):
            return value
        key = str(value).strip().lower().replace("_", "-")
        for member in cls:
            if member.value == key:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown wrap_long_links value {value!r} (expected one of: {choices})")


@dataclass(frozen=True)
class ReflowConfig:
    preferred_line_length: int = 80
    double_space_between_sentences: bool = False
    wrap_long_links: WrapLongLinks = WrapLongLinks.ISOLATE
    never_reflow_first_paragraph: bool = False

    def __post_init__(self) -> None:
        if int(self.preferred_line_length) < 1:
            raise ValueError(f"preferred_line_length must be >= 1, got {self.preferred_line_length}")
        object.__setattr__(self, "preferred_line_length", int(self.preferred_line_length))
        object.__setattr__(self, "wrap_long_links", WrapLongLinks.parse(self.wrap_long_links))

    def with_overrides(self, **overrides) -> "ReflowConfig":
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values) if values else self


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {raw!r}")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name}: expected an integer, got {raw!r}") from None


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> ReflowConfig:
    env = os.environ if environ is None else environ
    values = {}

    name = ENV_PREFIX + "PREFERRED_LINE_LENGTH"
    if env.get(name) is not None:
        values["preferred_line_length"] = _parse_int(name, env[name])

    name = ENV_PREFIX + "DOUBLE_SPACE_BETWEEN_SENTENCES"
    if env.get(name) is not None:
        values["double_space_between_sentences"] = _parse_bool(name, env[name])

    name = ENV_PREFIX + "WRAP_LONG_LINKS"
    if env.get(name) is not None:
        try:
            values["wrap_long_links"] = WrapLongLinks.parse(env[name])
        except ValueError as e:
            raise ValueError(f"{name}: {e}") from None

    name = ENV_PREFIX + "NEVER_REFLOW_FIRST_PARAGRAPH"
    if env.get(name) is not None:
        values["never_reflow_first_paragraph"] = _parse_bool(name, env[name])

    return ReflowConfig(**values)
