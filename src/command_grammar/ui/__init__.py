"""Console output for the command-grammar CLI."""
