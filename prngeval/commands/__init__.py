"""Click subcommands registered on the ``prngeval`` group."""
