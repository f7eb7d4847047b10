"""Allow ``python -m rankledger``."""

from rankledger.cli import main

raise SystemExit(main())
