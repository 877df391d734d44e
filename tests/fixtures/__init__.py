"""Test fixtures for Slackline.

This package provides reusable test fixtures:
- core: teams, channels, settings, a fake Slack and a built relay
- api: a TestClient bound to a relay that talks to the fake Slack
"""
