# ABOUTME: Module entry point so the CLI runs with `python -m cityweather`.

from cityweather.cli import main

raise SystemExit(main())
