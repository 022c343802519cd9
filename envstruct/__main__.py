from envstruct.demo import main

raise SystemExit(main())
