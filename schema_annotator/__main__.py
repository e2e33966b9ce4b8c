from schema_annotator.cli import main

raise SystemExit(main())
