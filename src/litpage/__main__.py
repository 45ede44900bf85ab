from litpage.cli import main

raise SystemExit(main())
