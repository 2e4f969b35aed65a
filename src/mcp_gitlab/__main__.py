from mcp_gitlab.cli import main

main()
