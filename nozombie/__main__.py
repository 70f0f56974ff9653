"""Allow ``python -m nozombie``."""

from nozombie.interfaces.cli.cli_main import main

raise SystemExit(main())
