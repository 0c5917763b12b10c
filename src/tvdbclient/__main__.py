"""Allow ``python -m tvdbclient``."""

from tvdbclient.cli.commands import main

main()
