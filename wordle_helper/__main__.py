from wordle_helper.solver import main

raise SystemExit(main())
