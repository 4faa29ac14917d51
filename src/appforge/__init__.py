"""appforge: turns project configs and AI replies into replayable scaffold plans."""

__version__ = "0.1.0"
