from mclisp.repl import main

raise SystemExit(main())
