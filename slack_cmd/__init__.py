"""slack-cmd: slash command handling for Slack conversations."""
