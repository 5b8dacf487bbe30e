from xattach.cli import cli_main

cli_main()
