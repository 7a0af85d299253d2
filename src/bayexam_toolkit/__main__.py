"""Allow ``python -m bayexam_toolkit``."""

from bayexam_toolkit.cli import main

raise SystemExit(main())
