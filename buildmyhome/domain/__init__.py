"""Domain layer for BuildMyHome.

This package centralizes the custom home builder rules: the cost estimation
formula, the home configuration record and the wizard state machine.
Nothing here imports Flask.
"""
