"""Command-line weather lookup: geocode a location, fetch a forecast, print it."""
