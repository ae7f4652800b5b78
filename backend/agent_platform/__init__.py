"""Backend application package for the agent platform dashboard.

This package contains API routes, the text-annotation pipeline with its
AI and rule-based annotators, dashboard persistence models, and the
sequential agent roster runner.
"""
