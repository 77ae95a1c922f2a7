from rapidwright_launcher.cli import main

raise SystemExit(main())
