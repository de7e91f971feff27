"""Non-interactive command line subcommands."""
