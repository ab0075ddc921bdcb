"""Sample registry for the runner.

Maps a short sample name (used for CLI selection) to the driver function
that runs it. Default samples are registered at module import time.

Usage:
    # Run a sample by name
    SampleRegistry.get_sample("iterator").run(console)

    # Register a custom sample
    SampleRegistry.register("custom", "My sample", run_custom)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from rich.console import Console

logger = logging.getLogger(__name__)

SampleRunner = Callable[[Console], Any]


@dataclass(frozen=True)
class Sample:
    """A runnable sample: name, one-line description and driver."""

    name: str
    description: str
    run: SampleRunner


class SampleRegistry:
    """Registry of runnable samples.

    Thread-safety: This class uses class-level state and is not thread-safe.
    Concurrent modifications should be avoided.
    """

    _registry: Dict[str, Sample] = {}

    @classmethod
    def register(cls, name: str, description: str, run: SampleRunner) -> None:
        """Register a sample driver.

        Args:
            name: Unique name for the sample (used for CLI selection)
            description: One-line description shown by `list`
            run: Driver taking a Console

        Raises:
            ValueError: If sample name already registered
        """
        if name in cls._registry:
            raise ValueError(f"Sample '{name}' already registered")
        cls._registry[name] = Sample(name=name, description=description, run=run)
        logger.debug(f"Registered sample '{name}'")

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a sample; unknown names are ignored."""
        cls._registry.pop(name, None)

    @classmethod
    def get_sample(cls, name: str) -> Sample:
        """Get sample by name.

        Raises:
            KeyError: If sample name not found in registry
        """
        if name not in cls._registry:
            raise KeyError(
                f"Unknown sample: '{name}'. "
                f"Available samples: {', '.join(cls.get_all_names())}"
            )
        return cls._registry[name]

    @classmethod
    def get_all_names(cls) -> List[str]:
        """Get sorted list of all registered sample names."""
        return sorted(cls._registry.keys())

    @classmethod
    def get_all_samples(cls) -> List[Sample]:
        """Get all registered samples sorted by name."""
        return [cls._registry[name] for name in cls.get_all_names()]


def _register_default_samples() -> None:
    """Register all default samples at module import time."""
    from design_patterns.samples.iterator_sample import run_iterator_sample
    from design_patterns.samples.state_sample import run_state_sample

    SampleRegistry.register(
        "iterator",
        "Behavioral - Iterator: pre-order walk of an organisation chart",
        run_iterator_sample,
    )
    SampleRegistry.register(
        "state",
        "Behavioral - State: purchase order lifecycle state machine",
        run_state_sample,
    )


_register_default_samples()
