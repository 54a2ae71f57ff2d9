"""Allow ``python -m brandaudit``."""

from brandaudit.cli.main import main

raise SystemExit(main())
