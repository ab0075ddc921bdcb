"""Printable sample drivers and the registry the CLI dispatches through."""

from design_patterns.samples.registry import Sample, SampleRegistry

__all__ = ["Sample", "SampleRegistry"]
