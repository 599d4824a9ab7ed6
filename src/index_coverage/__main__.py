from index_coverage.cli.main import main

raise SystemExit(main())
