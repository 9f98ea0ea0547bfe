from treecp.cli import main


raise SystemExit(main())
