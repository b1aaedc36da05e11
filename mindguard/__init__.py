"""
MindGuard application package.

Stress assessment and engagement tracking for daily wellbeing check-ins.
"""
