"""Allow running as `python -m nanny`."""

import nanny.cli as cli

cli.main()
