"""sipcore command line interface."""
