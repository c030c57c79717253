import sys

from agent_score_mcp.main import main

sys.exit(main())
