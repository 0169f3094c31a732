from linkprobe.cli import main

raise SystemExit(main())
