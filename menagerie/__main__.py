from .programs import cli

cli.with_helper()
