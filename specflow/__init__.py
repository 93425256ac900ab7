"""specflow: compile user-journey CSV tables into journey contracts and Playwright stubs."""

__version__ = "0.1.0"
