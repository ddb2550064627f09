"""Allow ``python -m prettydiag``."""

from prettydiag.main import main

raise SystemExit(main())
