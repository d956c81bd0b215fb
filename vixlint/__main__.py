from vixlint.cli import main

raise SystemExit(main())
