ISSUE_TITLE_PROMPT = "Issue Title"

REPORT_CONFIG_PANEL = "Report Fields"
BEHAVIOR_CONFIG_PANEL = "Behavior"
BASIC_CONFIG_PANEL = "Basic Configuration"

SSH_ENV_VARS = ["SSH_CONNECTION", "SSH_CLIENT", "SSH_TTY"]
