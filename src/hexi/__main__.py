from hexi.cli import main

raise SystemExit(main())
