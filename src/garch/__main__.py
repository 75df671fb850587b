from garch.cli import main

raise SystemExit(main())
