"""
Application Layer for TrainLog.

This package contains:
- ports/: Abstract store/source interfaces (what the core needs)
- use_cases/: The draft session coordinating drafts, cache and store
- exceptions: Errors raised by adapters and handled here
"""
