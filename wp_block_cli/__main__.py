from wp_block_cli.cli import main

raise SystemExit(main())
