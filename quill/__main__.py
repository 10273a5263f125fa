from quill.repl import main

raise SystemExit(main())
