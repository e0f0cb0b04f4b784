"""ResolvedConfiguration — the merged options and flags for one service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ResolvedConfiguration(BaseModel):
    """Options and flags resolved from DNS for a single service.

    Attributes:
        options: Option name to value; first value seen in merge order.
        flags: Names of enabled boolean flags.
    """

    model_config = {"frozen": True}

    options: dict[str, str] = Field(default_factory=dict)
    flags: frozenset[str] = Field(default_factory=frozenset)

    @property
    def empty(self) -> bool:
        return not self.options and not self.flags

    def to_args(self) -> list[str]:
        """Flatten into ``--key=value`` and ``--flag`` process arguments."""
        args = [f"--{key}={value}" for key, value in sorted(self.options.items())]
        args.extend(f"--{flag}" for flag in sorted(self.flags))
        return args

    def to_dict(self) -> dict[str, Any]:
        return {"options": dict(sorted(self.options.items())), "flags": sorted(self.flags)}
