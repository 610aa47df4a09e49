"""Allow ``python -m dkb_ynab INPUT OUTPUT``."""

from .cli import main

main()
