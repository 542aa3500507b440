"""Core launcher logic: argument parsing, configuration and build job resolution."""
