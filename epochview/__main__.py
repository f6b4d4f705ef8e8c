from epochview.cli import main

raise SystemExit(main())
