from specflow.cli.app import main

raise SystemExit(main())
