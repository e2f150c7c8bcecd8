"""Allow `python -m radio_minion`."""

from radio_minion.cli import main

main()
