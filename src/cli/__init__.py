"""suggestion-desk command line interface."""
