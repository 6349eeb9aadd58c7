from feedboat.cli import cli_main

cli_main()
