from bibview.cli.main import main

raise SystemExit(main())
