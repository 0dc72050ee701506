from roster.server import main

raise SystemExit(main())
