from reddit_insights_mcp.main import main

main()
