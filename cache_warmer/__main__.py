from cache_warmer.cli import cli

cli()
