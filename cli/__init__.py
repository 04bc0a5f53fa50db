"""Command-line presentation for the city temperature bands."""
