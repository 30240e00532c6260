import sys

from together_mcp.cli import main

sys.exit(main())
