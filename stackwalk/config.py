"""Configuration system for StackWalk.

This module defines how users pick the execution model for a tree operation
(explicit stack or native recursion), how printed trees are laid out, and
whether walk statistics are gathered.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO, Union


class WalkMode(Enum):
    """How a tree operation is executed.

    Both modes produce identical results; they differ only in where the
    pending work lives.
    """
    EXPLICIT_STACK = "stack"     # Heap-allocated control/result stacks
    RECURSIVE = "recursive"      # Native call stack (reference baseline)


class ConfigurationError(ValueError):
    """Raised when a WalkConfig fails validation."""
    pass


@dataclass
class RenderConfig:
    """Layout of printed trees."""

    indent: str = "  "                 # Repeated once per depth level
    separator: str = ", "              # Follows each value in a pre-order visit
    stream: Optional[TextIO] = None    # None = sys.stdout at write time


@dataclass
class WalkConfig:
    """Complete configuration for tree operations.

    The high-level API accepts one of these wherever it needs to know how to
    run a walk or how to print its output.
    """

    # Execution model
    mode: WalkMode = WalkMode.EXPLICIT_STACK

    # Output layout
    render: RenderConfig = field(default_factory=RenderConfig)

    # Walker bookkeeping (steps, peak stack depths)
    collect_stats: bool = True

    @classmethod
    def recursive(cls) -> 'WalkConfig':
        """Create config that runs the recursive baselines.

        Returns:
            WalkConfig using the native call stack
        """
        return cls(mode=WalkMode.RECURSIVE)

    @classmethod
    def quiet(cls) -> 'WalkConfig':
        """Create config for the explicit stack without statistics.

        Returns:
            WalkConfig with stats collection disabled
        """
        return cls(mode=WalkMode.EXPLICIT_STACK, collect_stats=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.mode, WalkMode):
            errors.append(f"mode must be a WalkMode, got {self.mode!r}")

        if not isinstance(self.render.indent, str):
            errors.append("indent must be a string")
        elif self.render.indent and self.render.indent.strip():
            errors.append("indent must contain only whitespace")

        if not isinstance(self.render.separator, str):
            errors.append("separator must be a string")

        if self.render.stream is not None and not hasattr(self.render.stream, "write"):
            errors.append("stream must provide a write() method")

        return errors

    def check(self) -> 'WalkConfig':
        """Validate and return self.

        Raises:
            ConfigurationError: If validate() reports any problem
        """
        errors = self.validate()
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(errors)}"
            )
        return self


def parse_mode(mode: Union[WalkMode, str]) -> WalkMode:
    """Parse a walk mode from string or enum.

    Args:
        mode: Mode as enum or string alias

    Returns:
        WalkMode enum value

    Raises:
        ValueError: If the string is not a known alias
    """
    if isinstance(mode, WalkMode):
        return mode

    mode_map = {
        'stack': WalkMode.EXPLICIT_STACK,
        'explicit': WalkMode.EXPLICIT_STACK,
        'explicit_stack': WalkMode.EXPLICIT_STACK,
        'iterative': WalkMode.EXPLICIT_STACK,
        'recursive': WalkMode.RECURSIVE,
        'native': WalkMode.RECURSIVE,
    }

    mode_lower = mode.lower() if isinstance(mode, str) else str(mode)
    if mode_lower in mode_map:
        return mode_map[mode_lower]

    raise ValueError(
        f"Unknown walk mode: {mode}. "
        f"Choose from: {', '.join(mode_map.keys())}"
    )
