"""BunkBuddy package.

Feature modules (subjects, groups, events, ...) each carry a model, a
repository interface and an in-memory repository, with a thin Flask
controller layer on top of small service classes.
"""
