"""CLI subcommands for updir."""
