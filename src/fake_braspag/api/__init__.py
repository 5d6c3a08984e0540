"""HTTP adapter for the Fake Braspag service."""
