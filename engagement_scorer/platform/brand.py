"""Centralized service identity for health checks and API docs."""

SERVICE_NAME = "AI Engagement Scorer"
SERVICE_VERSION = "1.0.0"
SERVICE_DESCRIPTION = "Scores how proficiently a user directs an AI assistant in a conversation"
