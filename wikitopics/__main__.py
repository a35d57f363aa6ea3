from wikitopics.cli import main

raise SystemExit(main())
