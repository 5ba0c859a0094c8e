"""funcdiff command-line interface."""
