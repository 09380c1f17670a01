"""Bundled sample maps."""

from .samples import Expectation, list_samples, get_sample, get_expectation

__all__ = ["Expectation", "list_samples", "get_sample", "get_expectation"]
